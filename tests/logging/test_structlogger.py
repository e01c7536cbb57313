import sys
import logging
import subprocess

import httpx
import pytest
import structlog

from okxapi.logging.structlogger import REDACTED, redact_credentials, get_logger


def test_redact_credential_keys():
    event = {
        "event": "api request",
        "api_key": "api-key-foo",
        "secret_key": "secret-foo",
        "passphrase": "passphrase-foo",
        "OK-ACCESS-KEY": "api-key-foo",
        "OK-ACCESS-SIGN": "LYlgx5HL9GTln7s0cNWQE3ancqEOUvAVZDhXzkB1y74=",
        "OK-ACCESS-PASSPHRASE": "passphrase-foo",
        "headers": {"OK-ACCESS-KEY": "api-key-foo"},
    }

    redacted = redact_credentials(None, "info", dict(event))

    assert redacted["event"] == "api request"
    for key in event:
        if key != "event":
            assert redacted[key] == REDACTED, key


def test_redact_keeps_other_keys():
    event = {"event": "api request", "path": "/api/v5/account/balance", "status": 200,
             "OK-ACCESS-TIMESTAMP": "2022-02-07T21:37:33.383Z"}

    assert redact_credentials(None, "info", dict(event)) == event


def test_get_logger_returns_structlog_logger():
    logger = get_logger("okxapi.test")
    assert hasattr(logger, "info")
    assert hasattr(logger, "error")


@pytest.mark.asyncio
async def test_requests_never_log_credentials(v5_api, caplog):
    get_logger("okxapi.test")
    caplog.set_level(logging.INFO)

    await v5_api.account_get_balance(ccy="BTC")

    assert "/api/v5/public/time" in caplog.text
    assert "/api/v5/account/balance?ccy=BTC" in caplog.text
    for secret in ("api-key-foo", "secret-foo", "passphrase-foo"):
        assert secret not in caplog.text


@pytest.mark.asyncio
async def test_failed_request_is_logged(v5_api, recorder, caplog):
    get_logger("okxapi.test")
    caplog.set_level(logging.INFO)
    recorder.routes["/api/v5/account/balance"] = (401, {"code": "50113", "data": [], "msg": "Invalid Sign"})

    with pytest.raises(httpx.HTTPStatusError):
        await v5_api.account_get_balance(timestamp="2022-02-07T21:37:33.383Z")

    assert "401" in caplog.text
    assert "LYlgx5HL9GTln7s0cNWQE3ancqEOUvAVZDhXzkB1y74=" not in caplog.text


IMPORT_CHECK = """
import sys, logging
import structlog

hook = sys.excepthook
handlers = list(logging.getLogger().handlers)

import okxapi
from okxapi.exchanges.mappings import rest_api_map

assert sys.excepthook is hook, "excepthook replaced"
assert logging.getLogger().handlers == handlers, "root handlers changed"
assert not structlog.is_configured(), "structlog configured"
"""


def test_import_leaves_process_logging_alone():
    # fresh interpreter, the cli module already configured logging in this one
    result = subprocess.run([sys.executable, "-c", IMPORT_CHECK], capture_output=True, text=True)

    assert result.returncode == 0, result.stderr


def test_get_logger_configures_process():
    get_logger("okxapi.test")

    assert structlog.is_configured()
