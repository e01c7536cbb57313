import httpx
import pytest

from okxapi.config import ClientConfig, Credentials, USER_AGENT


# fake credentials, requests only ever reach the mock transport
API_KEY = "api-key-foo"
SECRET_KEY = "secret-foo"
PASSPHRASE = "passphrase-foo"

V3_TIME_BODY = {"iso": "2022-02-07T21:40:25.791Z", "epoch": "1644270025.791"}
V5_TIME_BODY = {"code": "0", "data": [{"ts": "1644499170774"}], "msg": ""}

V3_TIMESTAMP = "2022-02-07T21:40:25.791Z"
V5_TIMESTAMP = "2022-02-10T13:19:30.774Z"


class Recorder:
    """Handler for httpx.MockTransport.

    Keeps every request it receives, replies with the (status, json body)
    registered for the request path, or 200 with an empty v5 envelope.
    """

    def __init__(self, routes: dict = None):
        self.requests = []
        self.routes = dict(routes or {})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (200, {"code": "0", "data": [], "msg": ""}))
        return httpx.Response(status, json=body)

    def session(self, base_url: str) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=base_url,
                                 transport=httpx.MockTransport(self),
                                 headers={"User-Agent": USER_AGENT})

    @property
    def paths(self):
        """request paths with query string, in the order they were sent"""
        return [request.url.raw_path.decode() for request in self.requests]


@pytest.fixture
def credentials():
    return Credentials(api_key=API_KEY, secret_key=SECRET_KEY, passphrase=PASSPHRASE)


@pytest.fixture
def config(credentials):
    return ClientConfig(credentials=credentials)


@pytest.fixture
def recorder():
    return Recorder({
        "/api/general/v3/time": (200, V3_TIME_BODY),
        "/api/v5/public/time": (200, V5_TIME_BODY),
    })


@pytest.fixture
def v3_api(config, recorder):
    from okxapi.exchanges.okx.rest.v3 import OkxV3RestAPI

    return OkxV3RestAPI(config, session=recorder.session(OkxV3RestAPI.endpoints_map["base_url"]))


@pytest.fixture
def v5_api(config, recorder):
    from okxapi.exchanges.okx.rest.v5 import OkxV5RestAPI

    return OkxV5RestAPI(config, session=recorder.session(OkxV5RestAPI.endpoints_map["base_url"]))
