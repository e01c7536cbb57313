from decimal import Decimal

import pytest

from okxapi.errors import RequestValidationError
from okxapi.exchanges.okx.rest.v5 import OkxV5RestAPI, snake_to_lower_camel
from okxapi.models.data.base.response import UnsupportedResponse


TS = "2022-02-07T21:37:33.383Z"


def test_snake_to_lower_camel():
    assert snake_to_lower_camel("inst_type") == "instType"
    assert snake_to_lower_camel("cl_ord_id") == "clOrdId"
    assert snake_to_lower_camel("ccy") == "ccy"
    assert snake_to_lower_camel("sub_acct") == "subAcct"




# ================================================================================
# ====== PUBLIC DATA
# ================================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize("operation, kwargs, expected", [
    ("public_data_get_system_time", {}, "/api/v5/public/time"),
    ("public_data_get_instruments", {"inst_type": "SPOT"}, "/api/v5/public/instruments?instType=SPOT"),
    ("public_data_get_instruments", {"inst_type": "OPTION", "uly": "BTC-USD"},
     "/api/v5/public/instruments?instType=OPTION&uly=BTC-USD"),
    ("public_data_get_instruments", {"inst_type": "SWAP", "uly": "BTC-USD", "inst_id": "BTC-USD-SWAP"},
     "/api/v5/public/instruments?instType=SWAP&uly=BTC-USD&instId=BTC-USD-SWAP"),
    ("get_delivery_exercise_history", {"inst_type": "FUTURES", "uly": "BTC-USD", "limit": 10},
     "/api/v5/public/delivery-exercise-history?instType=FUTURES&uly=BTC-USD&limit=10"),
    ("get_funding_rate_history", {"inst_id": "BTC-USD-SWAP"},
     "/api/v5/public/funding-rate-history?instId=BTC-USD-SWAP"),
])
async def test_public_paths(v5_api, recorder, operation, kwargs, expected):
    await getattr(v5_api, operation)(**kwargs)

    assert recorder.paths == [expected]
    assert "OK-ACCESS-SIGN" not in recorder.requests[0].headers




# ================================================================================
# ====== PRIVATE
# ================================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize("operation, kwargs, expected", [
    ("trade_get_order_details", {"inst_id": "BTC-USDT", "ord_id": "312269865356374016"},
     "/api/v5/trade/order?instId=BTC-USDT&ordId=312269865356374016"),
    ("trade_get_order_details", {"inst_id": "BTC-USDT", "ord_id": "1", "cl_ord_id": "b1"},
     "/api/v5/trade/order?instId=BTC-USDT&ordId=1&clOrdId=b1"),
    ("trade_get_order_list", {}, "/api/v5/trade/orders-pending"),
    ("trade_get_order_list", {"inst_type": "SPOT", "ord_type": "optimal_limit_ioc", "state": "live"},
     "/api/v5/trade/orders-pending?instType=SPOT&ordType=optimal_limit_ioc&state=live"),
    ("trade_get_order_history_last_7_days", {"inst_type": "SPOT", "state": "filled", "category": "twap"},
     "/api/v5/trade/orders-history?instType=SPOT&state=filled&category=twap"),
    ("trade_get_order_history_last_3_months", {"inst_type": "FUTURES", "limit": "50"},
     "/api/v5/trade/orders-history-archive?instType=FUTURES&limit=50"),
    ("trade_get_transaction_details_last_3_days", {"inst_id": "BTC-USDT", "ord_id": "1"},
     "/api/v5/trade/fills?instId=BTC-USDT&ordId=1"),
    ("trade_get_transaction_details_last_3_months", {"inst_type": "MARGIN"},
     "/api/v5/trade/fills-history?instType=MARGIN"),
    ("trade_get_algo_order_list", {"ord_type": "conditional", "inst_type": "SPOT", "limit": 20},
     "/api/v5/trade/orders-algo-pending?limit=20&ordType=conditional&instType=SPOT"),
    ("trade_get_algo_order_history", {"ord_type": "oco", "state": "effective"},
     "/api/v5/trade/orders-algo-history?ordType=oco&state=effective"),
    ("trade_get_algo_order_history", {"ord_type": "trigger", "algo_id": "7"},
     "/api/v5/trade/orders-algo-history?ordType=trigger&algoId=7"),
    ("funding_get_currencies", {}, "/api/v5/asset/currencies"),
    ("funding_get_balance", {"ccy": "BTC,ETH"}, "/api/v5/asset/balances?ccy=BTC%2CETH"),
    ("funding_get_account_asset_valuation", {"ccy": "USD"}, "/api/v5/asset/asset-valuation?ccy=USD"),
    ("funding_get_funds_transfer_state", {"trans_id": "1", "type": 2},
     "/api/v5/asset/transfer-state?transId=1&type=2"),
    ("funding_asset_bills_details", {"ccy": "BTC", "type": 151}, "/api/v5/asset/bills?ccy=BTC&type=151"),
    ("funding_lightning_deposits", {"ccy": "BTC", "amt": Decimal("0.01"), "to": 1},
     "/api/v5/asset/deposit-lightning?amt=0.01&to=1&ccy=BTC"),
    ("funding_get_deposit_address", {"ccy": "BTC"}, "/api/v5/asset/deposit-address?ccy=BTC"),
    ("funding_get_deposit_history", {"ccy": "BTC", "state": 2}, "/api/v5/asset/deposit-history?ccy=BTC&state=2"),
    ("funding_get_withdrawal_history", {"state": -3}, "/api/v5/asset/withdrawal-history?state=-3"),
    ("funding_get_saving_balance", {}, "/api/v5/asset/saving-balance"),
    ("account_get_balance", {}, "/api/v5/account/balance"),
    ("account_get_positions", {"inst_type": "SWAP", "pos_id": "9"}, "/api/v5/account/positions?instType=SWAP&posId=9"),
    ("account_get_bills_details_last_7_days", {"mgn_mode": "cross", "type": 2, "sub_type": 1},
     "/api/v5/account/bills?mgnMode=cross&type=2&subType=1"),
    ("account_get_bills_details_last_3_months", {"ct_type": "linear", "sub_type": 174},
     "/api/v5/account/bills-archive?ctType=linear&subType=174"),
    ("subaccount_view_sub_account_list", {"enable": "true"}, "/api/v5/users/subaccount/list?enable=true"),
    ("subaccount_get_sub_account_balance", {"sub_acct": "sub1"}, "/api/v5/account/subaccount/balances?subAcct=sub1"),
    ("market_data_get_tickers", {"inst_type": "SWAP", "uly": "BTC-USD"},
     "/api/v5/market/tickers?instType=SWAP&uly=BTC-USD"),
    ("market_data_get_ticker", {"inst_id": "BTC-USDT"}, "/api/v5/market/ticker?instId=BTC-USDT"),
])
async def test_private_paths(v5_api, recorder, operation, kwargs, expected):
    await getattr(v5_api, operation)(timestamp=TS, **kwargs)

    assert recorder.paths == [expected]
    headers = recorder.requests[0].headers
    assert headers["OK-ACCESS-TIMESTAMP"] == TS
    assert headers["OK-ACCESS-KEY"] == "api-key-foo"


@pytest.mark.asyncio
async def test_tickers_are_signed(v5_api, recorder):
    await v5_api.market_data_get_tickers(inst_type="SPOT", timestamp=TS)

    assert recorder.requests[0].headers["OK-ACCESS-SIGN"] == "pSr9DyTI11oB/GJwhq4SrbKJi7wWJFFNVA5LhOK2F1U="


@pytest.mark.asyncio
async def test_signature_covers_camel_case_query(v5_api, recorder):
    await v5_api.trade_get_order_list(inst_type="SPOT", ord_type="limit", timestamp=TS)

    assert recorder.requests[0].headers["OK-ACCESS-SIGN"] == "3ELlsKfhC8dNYpPH/0L8tYHe4M5CDhpWrmiC7zBlGbM="




# ================================================================================
# ====== VALIDATION
# ================================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize("operation, kwargs", [
    ("public_data_get_instruments", {"inst_type": "STOCK"}),
    # uly required for OPTION
    ("public_data_get_instruments", {"inst_type": "OPTION"}),
    # uly only for derivatives
    ("public_data_get_instruments", {"inst_type": "SPOT", "uly": "BTC-USD"}),
    ("public_data_get_instruments", {"inst_type": "MARGIN", "uly": "BTC-USD"}),
    ("get_delivery_exercise_history", {"inst_type": "SWAP", "uly": "BTC-USD"}),
    ("get_delivery_exercise_history", {"inst_type": "FUTURES", "uly": None}),
    ("get_funding_rate_history", {"inst_id": "BTC-USD-220325"}),
])
async def test_invalid_public_params_no_request(v5_api, recorder, operation, kwargs):
    with pytest.raises(RequestValidationError):
        await getattr(v5_api, operation)(**kwargs)

    assert recorder.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("operation, kwargs", [
    ("trade_get_order_details", {"inst_id": "BTC-USDT"}),
    ("trade_get_order_list", {"inst_type": "STOCK"}),
    ("trade_get_order_list", {"ord_type": "Optimal_limit_ioc"}),
    ("trade_get_order_list", {"state": "filled"}),
    ("trade_get_order_history_last_7_days", {"inst_type": "SPOT", "state": "live"}),
    ("trade_get_order_history_last_7_days", {"inst_type": "SPOT", "category": "manual"}),
    ("trade_get_order_history_last_3_months", {"inst_type": "SPOT", "ord_type": "stop"}),
    ("trade_get_transaction_details_last_3_days", {"inst_type": "BOND"}),
    ("trade_get_algo_order_list", {"ord_type": "grid"}),
    ("trade_get_algo_order_list", {"ord_type": "oco", "inst_type": "OPTION"}),
    ("trade_get_algo_order_history", {"ord_type": "oco"}),
    ("trade_get_algo_order_history", {"ord_type": "oco", "state": "live"}),
    ("funding_get_funds_transfer_state", {"trans_id": "1", "type": 3}),
    ("funding_asset_bills_details", {"type": 3}),
    ("funding_lightning_deposits", {"ccy": "BTC", "amt": Decimal("0.2")}),
    ("funding_lightning_deposits", {"ccy": "BTC", "amt": Decimal("0.0000001")}),
    ("funding_lightning_deposits", {"ccy": "BTC", "amt": Decimal("0.01"), "to": 2}),
    ("funding_get_deposit_history", {"state": 3}),
    ("funding_get_withdrawal_history", {"state": 6}),
    ("account_get_positions", {"inst_type": "SPOT"}),
    ("account_get_bills_details_last_7_days", {"mgn_mode": "portfolio"}),
    ("account_get_bills_details_last_7_days", {"ct_type": "quanto"}),
    ("account_get_bills_details_last_3_months", {"type": 14}),
    ("account_get_bills_details_last_3_months", {"sub_type": 7}),
    ("subaccount_view_sub_account_list", {"enable": "yes"}),
    ("market_data_get_tickers", {"inst_type": "MARGIN"}),
])
async def test_invalid_private_params_no_request(v5_api, recorder, operation, kwargs):
    with pytest.raises(RequestValidationError) as exc_info:
        await getattr(v5_api, operation)(**kwargs)

    assert exc_info.value.endpoint == operation
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_lightning_amount_bounds_inclusive(v5_api, recorder):
    await v5_api.funding_lightning_deposits(ccy="BTC", amt=Decimal("0.000001"), timestamp=TS)
    await v5_api.funding_lightning_deposits(ccy="BTC", amt=Decimal("0.1"), timestamp=TS)

    assert recorder.paths == [
        "/api/v5/asset/deposit-lightning?amt=0.000001&ccy=BTC",
        "/api/v5/asset/deposit-lightning?amt=0.1&ccy=BTC",
    ]




# ================================================================================
# ====== UNSUPPORTED
# ================================================================================


UNSUPPORTED = sorted(OkxV5RestAPI.endpoints_map["unsupported_methods"])


def test_every_unsupported_endpoint_has_a_method():
    for method in UNSUPPORTED:
        assert callable(getattr(OkxV5RestAPI, method)), method


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", UNSUPPORTED)
async def test_unsupported_no_request(v5_api, recorder, operation):
    resp = await getattr(v5_api, operation)()

    assert isinstance(resp, UnsupportedResponse)
    assert resp.is_ok is False
    assert resp.is_supported is False
    assert resp.status_code == 501
    assert resp.value == operation
    assert resp.endpoint.startswith("/api/v5/")
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_unsupported_accepts_any_arguments(v5_api, recorder):
    resp = await v5_api.market_data_get_candlesticks("BTC-USDT", bar="1m", limit=100)

    assert resp.endpoint == "/api/v5/market/candles"
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_unsupported_without_credentials(recorder):
    api = OkxV5RestAPI(session=recorder.session("https://www.okx.com"))

    resp = await api.account_get_greeks(ccy="BTC")

    assert resp.endpoint == "/api/v5/account/greeks"
