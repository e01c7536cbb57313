from okxapi.config import ClientConfig, Credentials
from okxapi.errors import OkxError, RequestValidationError, MissingCredentialsError
from okxapi.exchanges.okx.rest.v3 import OkxV3RestAPI
from okxapi.exchanges.okx.rest.v5 import OkxV5RestAPI
from okxapi.models.data.base.response import UnsupportedResponse


__all__ = [
    "ClientConfig",
    "Credentials",
    "OkxError",
    "RequestValidationError",
    "MissingCredentialsError",
    "OkxV3RestAPI",
    "OkxV5RestAPI",
    "UnsupportedResponse",
]
