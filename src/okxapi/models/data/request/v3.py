'''Parameters of v3 endpoints that have an enumerated domain or an either-or rule.

Endpoints with free-form parameters only do not have a model.
'''
from typing import Optional, Union

from pydantic import model_validator

from okxapi.models.data.base.types import (V3_ORDERSTATE, V3_ALGOSTATUS, V3_FEECATEGORY,
                                           V3_LOANSTATUS, V3_ACCOUNTTYPE, V3_VALUATION_CURRENCY,
                                           V3_SPOT_BILLTYPE, V3_FUNDING_BILLTYPE,
                                           V3_SWAP_BILLTYPE, V3_MARGIN_BILLTYPE)
from .base import RequestModel, exactly_one


# after / before / limit
PAGE = Optional[Union[int, str]]

# v3 endpoints always send a limit, the maximum is also the default
DEFAULT_LIMIT = "100"


# ================================================================================
# ====== ORDERS
# ================================================================================


class OrderIdentifier(RequestModel):
    """Either client_oid or order_id must be present (not both)"""
    order_id: Optional[str] = None
    client_oid: Optional[str] = None

    @model_validator(mode="after")
    def check_identifier(self):
        exactly_one(self, "order_id", "client_oid")
        return self

    @property
    def value(self) -> str:
        return self.order_id if self.order_id is not None else self.client_oid


class InstrumentOrderList(RequestModel):
    """spot and margin order list"""
    instrument_id: str
    state: V3_ORDERSTATE
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT


class OrderList(RequestModel):
    """swap and futures order list, instrument is part of the path"""
    state: V3_ORDERSTATE
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT


class OptionOrderList(RequestModel):
    state: V3_ORDERSTATE
    instrument_id: Optional[str] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT


class SpotAlgoList(RequestModel):
    """status and algo_id are mandatory, select either one"""
    instrument_id: str
    order_type: str
    status: Optional[V3_ALGOSTATUS] = None
    algo_id: Optional[str] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT

    @model_validator(mode="after")
    def check_status_or_algo_id(self):
        exactly_one(self, "status", "algo_id")
        return self


class SwapAlgoList(RequestModel):
    """status and algo_id are mandatory, select either one"""
    order_type: str
    status: Optional[V3_ALGOSTATUS] = None
    algo_id: Optional[str] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT

    @model_validator(mode="after")
    def check_status_or_algo_id(self):
        exactly_one(self, "status", "algo_id")
        return self


# ================================================================================
# ====== TRADE FEES
# ================================================================================


class InstrumentTradeFee(RequestModel):
    """Choose and enter one parameter between category and instrument_id"""
    instrument_id: Optional[str] = None
    category: Optional[V3_FEECATEGORY] = None

    # stricter than "not both": OKX asks to "choose and enter one parameter", sending neither is rejected too
    @model_validator(mode="after")
    def check_one_param(self):
        exactly_one(self, "category", "instrument_id")
        return self


class UnderlyingTradeFee(RequestModel):
    """Choose and enter one parameter between category and underlying"""
    category: Optional[V3_FEECATEGORY] = None
    underlying: Optional[str] = None

    # same rule as InstrumentTradeFee, one of the two is required
    @model_validator(mode="after")
    def check_one_param(self):
        exactly_one(self, "category", "underlying")
        return self


# ================================================================================
# ====== LEDGERS
# ================================================================================


class SpotLedger(RequestModel):
    type: Optional[V3_SPOT_BILLTYPE] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT


class FundingLedger(RequestModel):
    currency: Optional[str] = None
    type: Optional[V3_FUNDING_BILLTYPE] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT


class SwapLedger(RequestModel):
    type: Optional[V3_SWAP_BILLTYPE] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT


class MarginLedger(RequestModel):
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT
    type: Optional[V3_MARGIN_BILLTYPE] = None


# ================================================================================
# ====== ACCOUNT
# ================================================================================


class AssetValuation(RequestModel):
    account_type: Optional[V3_ACCOUNTTYPE] = None
    valuation_currency: Optional[V3_VALUATION_CURRENCY] = None


class MarginLoanHistory(RequestModel):
    status: V3_LOANSTATUS
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = DEFAULT_LIMIT
