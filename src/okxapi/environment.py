'''Build a ClientConfig from environment variables.

Only the CLI (or the caller's own entry point) should use this,
API classes always take an explicit ClientConfig.

Notes:
    In .env file (or in the environment), keys should be named :
        API Key : OKX_API_KEY
        API Secret : OKX_SECRET_KEY
        Passphrase : OKX_PASSPHRASE
        Base URL : OKX_BASE_URL (v3) / OKX_BASE_V5_URL (v5)
'''
import os
from typing import Optional

from dotenv import load_dotenv
from typing_extensions import Literal

from okxapi.config import ClientConfig, Credentials


BASE_URL_ENV_KEYS = {
    "v3": "OKX_BASE_URL",
    "v5": "OKX_BASE_V5_URL",
}


def load_config(version: Literal["v3", "v5"] = "v5", env_file: Optional[str] = None) -> ClientConfig:
    """Read credentials and base url from env file / environment.

    Args:
        version (str): api version, selects the base url variable
        env_file (str): path to .env file (optional, default: search from cwd)

    Returns:
        ClientConfig
    """
    load_dotenv(dotenv_path=env_file)

    credentials = Credentials(
        api_key=os.environ.get("OKX_API_KEY", ""),
        secret_key=os.environ.get("OKX_SECRET_KEY", ""),
        passphrase=os.environ.get("OKX_PASSPHRASE", ""),
    )

    base_url = os.environ.get(BASE_URL_ENV_KEYS[version]) or None

    return ClientConfig(credentials=credentials, base_url=base_url)
