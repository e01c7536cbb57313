'''Errors raised by okxapi before any request leaves the machine.

Transport errors (httpx.HTTPError and subclasses) are never wrapped,
they reach the caller as raised by httpx.
'''


class OkxError(Exception):
    """Base class for okxapi errors"""


class RequestValidationError(OkxError, ValueError):
    """A parameter is outside its enumerated domain, or an either-or rule is broken.

    Args:
        endpoint (str): operation name the parameters were meant for
        errors (list): list of error dicts (pydantic format)
    """

    def __init__(self, endpoint: str, errors: list):
        self.endpoint = endpoint
        self.errors = errors
        super().__init__(f"Invalid parameters for {endpoint} : {self._summary()}")

    def _summary(self):
        parts = []
        for err in self.errors:
            loc = ".".join(str(item) for item in err.get("loc", ()) if item != "__root__")
            msg = err.get("msg", "")
            parts.append(f"{loc}: {msg}" if loc else msg)
        return "; ".join(parts)


class MissingCredentialsError(OkxError):
    """Private endpoint requested while api key, secret key or passphrase is empty"""
