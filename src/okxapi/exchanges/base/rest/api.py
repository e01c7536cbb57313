'''Define Base Class for OKX Rest APIs'''
from typing import Optional
from urllib.parse import quote, urlencode

import httpx
import structlog
import ujson

from okxapi.config import ClientConfig
from okxapi.errors import MissingCredentialsError
from okxapi.models.data.base.response import UnsupportedResponse
from .api_abc import APIAbc
from .auth import sign, format_timestamp


# left unconfigured, entry points (see okxapi.cli) set up rendering
custom_logger = structlog.get_logger(__name__)


class APIBase(APIAbc):
    """Baseclass for OKX Rest APIs.

    Subclasses set `exchange`, `version` and `endpoints_map`, the latter with keys:
    base_url, server_time, public_methods, private_methods, unsupported_methods.

    Args:
        config (ClientConfig): credentials, base url, user agent and timeout
        session (httpx.AsyncClient): (optional) session to use instead of creating one,
            it is then up to the caller to close it
    """

    exchange = "okx"
    version = None
    endpoints_map = None

    # how the timestamp used for signing is rendered
    timestamp_format = "iso8601"


    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[httpx.AsyncClient] = None):

        self.config = config if config is not None else ClientConfig()
        self.credentials = self.config.credentials
        self.base_url = self.config.base_url or self.endpoints_map["base_url"]
        self.public_methods = self.endpoints_map["public_methods"]
        self.private_methods = self.endpoints_map["private_methods"]

        self._owns_session = session is None
        if session is None:
            # None in config means the httpx default (5s), not "no timeout"
            timeout = self.config.timeout if self.config.timeout is not None else httpx.Timeout(5.0)
            session = httpx.AsyncClient(base_url=self.base_url,
                                        headers={"User-Agent": self.config.user_agent},
                                        timeout=timeout
                                        )
        self.session = session


    def __repr__(self):
        return f"<{type(self).__name__} base_url={self.base_url!r}>"


    async def close(self):
        """ close this session, if we created it.
        :returns: none
        """
        if self._owns_session:
            await self.session.aclose()
        return


    async def __aenter__(self):
        return self


    async def __aexit__(self, *exc_info):
        await self.close()




    # ================================================================================
    # ==== AUTHENTICATION
    # ================================================================================


    def _check_credentials(self):
        if not self.credentials.is_complete:
            raise MissingCredentialsError(
                "Either api key, secret key or passphrase is not set! (Use `okxapi.environment.load_config()`)"
            )


    def _auth_headers(self, request_path: str, timestamp: str) -> dict:
        creds = self.credentials
        return {
            "OK-ACCESS-KEY": creds.api_key.get_secret_value(),
            "OK-ACCESS-SIGN": sign(creds.secret_key.get_secret_value(), "GET", request_path, timestamp),
            "OK-ACCESS-TIMESTAMP": timestamp,
            "OK-ACCESS-PASSPHRASE": creds.passphrase.get_secret_value(),
        }




    # ================================================================================
    # ==== TIME
    # ================================================================================


    async def server_timestamp(self) -> str:
        """Fetch server time and render it the way it is sent in OK-ACCESS-TIMESTAMP.

        Returns:
            str: eg "2022-02-07T21:40:25.791Z"

        Note:
            One public request per call, nothing is cached.
        """
        response = await self.query_public(self.endpoints_map["server_time"])
        body = ujson.loads(response.text)
        ms = self._server_time_ms(body)
        return format_timestamp(ms, self.timestamp_format)




    # ================================================================================
    # ==== UTILS
    # ================================================================================


    def _query_key(self, key: str) -> str:
        return key


    def build_request_path(self, path: str, params: Optional[dict] = None) -> str:
        """Append query string to path.

        Args:
            path (str): API URL path sans host
            params (dict): (optional) parameters, None values are dropped

        Returns:
            str: path, followed by "?" and the encoded query if any parameter remains
        """
        if not params:
            return path

        query = urlencode(
            [(self._query_key(key), value) for key, value in params.items() if value is not None]
        )

        if not query:
            return path
        return f"{path}?{query}"


    def _resolve(self, methods: dict, method: str, path_params: Optional[dict]) -> str:
        path = methods[method]
        if path_params:
            # ids may hold "/", "?" or "#", they must stay inside their path segment
            path = path.format(**{k: quote(str(v), safe="") for k, v in path_params.items()})
        return path


    def unsupported(self, method: str) -> UnsupportedResponse:
        """Result of endpoints that are documented by OKX but not wrapped, no request is sent"""
        endpoint = self.endpoints_map["unsupported_methods"][method]
        custom_logger.warning("unsupported endpoint", method=method, version=self.version)
        return UnsupportedResponse(value=method, endpoint=endpoint)




    # ================================================================================
    # ==== BASE QUERY METHODS
    # ================================================================================


    async def _query(self, method: str, request_path: str, headers: Optional[dict] = None) -> httpx.Response:
        """ Low-level query handling.

        Args:
            method (str): method key, for logging
            request_path (str): API URL path sans host, with query string
            headers (dict): HTTPS headers (optional)

        Returns:
            httpx.Response

        Raises:
            httpx.HTTPStatusError: if response status not successful

        Note:
           Use :py:meth:`query_private` or :py:meth:`query_public`
           unless you have a good reason not to.
        """
        response = await self.session.get(request_path, headers=headers)

        custom_logger.info("api request",
                           method=method,
                           path=request_path,
                           status=response.status_code)

        if not response.is_success:
            response.raise_for_status()

        return response


    async def query_public(self, method: str, params: Optional[dict] = None, path_params: Optional[dict] = None) -> httpx.Response:
        """ Performs an API query that does not require a valid key/secret pair.

        Args:
            method (str): method key as defined in endpoints map
            params (dict): (optional) query parameters
            path_params (dict): (optional) values substituted in the path template

        Returns:
            httpx.Response
        """
        path = self._resolve(self.public_methods, method, path_params)
        request_path = self.build_request_path(path, params)

        return await self._query(method, request_path)


    async def query_private(self,
                            method: str,
                            params: Optional[dict] = None,
                            path_params: Optional[dict] = None,
                            timestamp: Optional[str] = None
                            ) -> httpx.Response:
        """ Performs an API query that requires valid credentials.

        Args:
            method (str): method key as defined in endpoints map
            params (dict): (optional) query parameters
            path_params (dict): (optional) values substituted in the path template
            timestamp (str): (optional) value to sign with,
                fetched from the server when not given

        Returns:
            httpx.Response
        """
        self._check_credentials()

        path = self._resolve(self.private_methods, method, path_params)
        request_path = self.build_request_path(path, params)

        if timestamp is None:
            timestamp = await self.server_timestamp()

        headers = self._auth_headers(request_path, timestamp)

        return await self._query(method, request_path, headers=headers)
