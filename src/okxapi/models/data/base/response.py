from typing import Any

from pydantic import BaseModel, conint


# ================================================================================


class OkxResponse(BaseModel):
    """Base Response Model

    Args:
        status_code (int): http code
        value (typing.Any): contains data of the response

    Returns:
        pydantic.BaseModel
    """
    status_code: conint(ge=100, le=1000)
    value: Any


class UnsupportedResponse(OkxResponse):
    """Returned by endpoints that exist in the exchange docs but are not wrapped yet.

    No request is sent, whatever the arguments.

    Args:
        status_code (int): always 501 (Not Implemented)
        value (str): method key of the endpoint
        endpoint (str): path of the endpoint

    Attributes:
        is_ok (bool): False
        is_supported (bool): False

    Returns:
        pydantic.BaseModel
    """
    status_code: conint(ge=100, le=1000) = 501
    endpoint: str
    is_ok: bool = False
    is_supported: bool = False
