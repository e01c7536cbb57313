'''Client configuration.

Values are passed explicitly to the API constructors.
Reading them from the environment is done by okxapi.environment.
'''
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, SecretStr


USER_AGENT = "ComptaCrypto/OKX"


class Credentials(BaseModel):
    """API identity

    Args:
        api_key (str)
        secret_key (str)
        passphrase (str)

    Note:
        Values are stored as pydantic.SecretStr so they never show up in repr or logs.
        Use `.get_secret_value()` to read them.
    """
    model_config = ConfigDict(frozen=True)

    api_key: SecretStr = SecretStr("")
    secret_key: SecretStr = SecretStr("")
    passphrase: SecretStr = SecretStr("")

    @property
    def is_complete(self) -> bool:
        return all(
            value.get_secret_value()
            for value in (self.api_key, self.secret_key, self.passphrase)
        )


class ClientConfig(BaseModel):
    """Everything needed to build an API object

    Args:
        credentials (Credentials): defaults to empty credentials (public endpoints only)
        base_url (str): defaults to the base url of the chosen API version
        user_agent (str)
        timeout (float): seconds, passed to httpx (None means httpx default)
    """
    model_config = ConfigDict(frozen=True)

    credentials: Credentials = Credentials()
    base_url: Optional[str] = None
    user_agent: str = USER_AGENT
    timeout: Optional[Union[float, int]] = None
