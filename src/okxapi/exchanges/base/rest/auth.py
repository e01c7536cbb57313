'''Request signing and timestamp formatting shared by every API version.

see: https://www.okx.com/docs-v5/en/#rest-api-authentication-signature
'''
import base64
import hashlib
import hmac
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Union

from typing_extensions import Literal


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TIMESTAMP_FORMAT = Literal["iso8601", "epoch_ms"]


def sign(secret_key: str, method: str, request_path: str, timestamp: str) -> str:
    """Sign a request according to OKX's scheme.

    Args:
        secret_key (str): API secret, used as HMAC key
        method (str): http method, uppercase
        request_path (str): path sans host, query string included and already encoded
        timestamp (str): exact value sent in OK-ACCESS-TIMESTAMP header

    Returns:
        base64 encoded HMAC-SHA256 digest of timestamp + method + request_path

    Note:
        Given the JS example from the official doc:

            var hash = CryptoJS.HmacSHA256("message", "secret");
            CryptoJS.enc.Base64.stringify(hash);
            // => 'i19IcCmVwVmMVz2x4hhmqbgl1KeU0WnXBgoDYFeWNgs='
    """
    message = f"{timestamp}{method}{request_path}"

    # Unicode-objects must be encoded before hashing
    signature = hmac.new(secret_key.encode("utf-8"),
                         message.encode("utf-8"),
                         hashlib.sha256)
    sigdigest = base64.b64encode(signature.digest())

    return sigdigest.decode()


def epoch_seconds_to_ms(epoch: Union[str, Decimal]) -> int:
    """"1644270025.791" ==> 1644270025791"""
    return int(Decimal(epoch) * 1000)


def iso8601_from_ms(ms: int) -> str:
    """Milliseconds since epoch to UTC ISO-8601 with millisecond precision.

    eg: 1644270025791 ==> "2022-02-07T21:40:25.791Z"
    """
    ms = int(ms)
    dt = EPOCH + timedelta(milliseconds=ms)
    return f"{dt.strftime('%Y-%m-%dT%H:%M:%S')}.{ms % 1000:03d}Z"


def format_timestamp(ms: int, fmt: TIMESTAMP_FORMAT = "iso8601") -> str:
    if fmt == "iso8601":
        return iso8601_from_ms(ms)
    if fmt == "epoch_ms":
        return str(int(ms))
    raise ValueError(f"Unknown timestamp format : {fmt}")
