import sys
import asyncio

import click
import httpx
import ujson

from okxapi.environment import load_config
from okxapi.errors import OkxError
from okxapi.exchanges.mappings import rest_api_map
from okxapi.logging.structlogger import get_logger, log_exception
from okxapi.models.data.base.response import UnsupportedResponse


logger = get_logger(__name__)

VERSIONS = click.Choice(sorted(rest_api_map))


def parse_params(pairs) -> dict:
    """("ccy=BTC", "limit=10") ==> {"ccy": "BTC", "limit": "10"}"""
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--param")
        params[key] = value
    return params


def operations(api_class) -> set:
    mapping = api_class.endpoints_map
    return {*mapping["public_methods"], *mapping["private_methods"], *mapping["unsupported_methods"]}


async def _server_timestamp(version: str) -> str:
    async with rest_api_map[version](load_config(version)) as api:
        return await api.server_timestamp()


async def _call(version: str, operation: str, params: dict):
    async with rest_api_map[version](load_config(version)) as api:
        return await getattr(api, operation)(**params)


def echo_result(result):
    if isinstance(result, UnsupportedResponse):
        click.echo(ujson.dumps(result.model_dump()))
        return
    click.echo(result.status_code)
    click.echo(result.text)


@click.command()
@click.option("--version", "-v", type=VERSIONS, default="v5", help="API version")
def server_time(version):
    """Print the timestamp private requests would be signed with"""
    try:
        click.echo(asyncio.run(_server_timestamp(version)))
    except httpx.HTTPError as e:
        log_exception(logger, e)
        sys.exit(1)


@click.command()
@click.option("--version", "-v", type=VERSIONS, default="v5", help="API version")
@click.option("--param", "-p", "params", multiple=True, help="Request parameter as key=value (repeatable)")
@click.option("--timestamp", "-t", default=None, help="Sign with this timestamp instead of fetching server time")
@click.argument("operation")
def call_endpoint(version, params, timestamp, operation):
    """Run one endpoint OPERATION (method name, eg account_get_balance)"""
    api_class = rest_api_map[version]
    if operation not in operations(api_class):
        raise click.BadParameter(f"unknown {version} operation {operation!r}", param_hint="OPERATION")

    kwargs = parse_params(params)
    if timestamp is not None:
        if operation not in api_class.endpoints_map["private_methods"]:
            raise click.UsageError(f"{operation} is not signed, --timestamp does not apply")
        kwargs["timestamp"] = timestamp

    try:
        result = asyncio.run(_call(version, operation, kwargs))
    except (OkxError, httpx.HTTPError) as e:
        log_exception(logger, e)
        sys.exit(1)

    echo_result(result)
