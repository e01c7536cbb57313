'''Parameters of v5 endpoints that have an enumerated domain or an either-or rule.

Field names are snake_case, they are sent as lowerCamelCase.
'''
import typing
from decimal import Decimal

from pydantic import Field, model_validator

from okxapi.models.data.base.types import (INSTTYPE, DERIVATIVE_INSTTYPE, TICKER_INSTTYPE,
                                           POSITION_INSTTYPE, ALGO_INSTTYPE, DELIVERY_INSTTYPE,
                                           ORDERTYPE, PENDING_ORDERSTATE, HISTORY_ORDERSTATE,
                                           ORDERCATEGORY, ALGO_ORDERTYPE, ALGO_ORDERSTATE,
                                           MARGINMODE, CONTRACTTYPE, ACCOUNT_BILLTYPE,
                                           ACCOUNT_BILLSUBTYPE, ASSET_BILLTYPE, TRANSFERTYPE,
                                           DEPOSITSTATE, WITHDRAWALSTATE, LIGHTNING_ACCOUNT,
                                           SUBACCOUNT_ENABLE)
from .base import RequestModel, at_least_one


PAGE = typing.Optional[typing.Union[int, str]]

DERIVATIVES = typing.get_args(DERIVATIVE_INSTTYPE)


# ================================================================================
# ====== PUBLIC DATA
# ================================================================================


class Instruments(RequestModel):
    inst_type: INSTTYPE
    uly: typing.Optional[str] = None
    inst_id: typing.Optional[str] = None

    @model_validator(mode="after")
    def check_underlying(self):
        # uly is required for OPTION, and only applicable to FUTURES/SWAP/OPTION
        if self.uly is None:
            if self.inst_type == "OPTION":
                raise ValueError("uly is required for OPTION")
        elif self.inst_type not in DERIVATIVES:
            raise ValueError(f"uly is only applicable to {'/'.join(DERIVATIVES)}")
        return self


class DeliveryExerciseHistory(RequestModel):
    inst_type: DELIVERY_INSTTYPE
    uly: str
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None


class FundingRateHistory(RequestModel):
    inst_id: str
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None

    @model_validator(mode="after")
    def check_swap(self):
        if "SWAP" not in self.inst_id:
            raise ValueError("Only applicable to SWAP instruments")
        return self


class Tickers(RequestModel):
    inst_type: TICKER_INSTTYPE
    uly: typing.Optional[str] = None


# ================================================================================
# ====== TRADE
# ================================================================================


class OrderDetails(RequestModel):
    """Either ord_id or cl_ord_id is required, if both are passed, ord_id will be used"""
    inst_id: str
    ord_id: typing.Optional[str] = None
    cl_ord_id: typing.Optional[str] = None

    @model_validator(mode="after")
    def check_identifier(self):
        at_least_one(self, "ord_id", "cl_ord_id")
        return self


class OrderList(RequestModel):
    inst_type: typing.Optional[INSTTYPE] = None
    uly: typing.Optional[str] = None
    inst_id: typing.Optional[str] = None
    ord_type: typing.Optional[ORDERTYPE] = None
    state: typing.Optional[PENDING_ORDERSTATE] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None


class OrderHistory(RequestModel):
    inst_type: INSTTYPE
    uly: typing.Optional[str] = None
    inst_id: typing.Optional[str] = None
    ord_type: typing.Optional[ORDERTYPE] = None
    state: typing.Optional[HISTORY_ORDERSTATE] = None
    category: typing.Optional[ORDERCATEGORY] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None


class RecentFills(RequestModel):
    inst_type: typing.Optional[INSTTYPE] = None
    uly: typing.Optional[str] = None
    inst_id: typing.Optional[str] = None
    ord_id: typing.Optional[str] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None


class FillsHistory(RecentFills):
    inst_type: INSTTYPE


class AlgoOrderList(RequestModel):
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None
    ord_type: ALGO_ORDERTYPE
    algo_id: typing.Optional[str] = None
    inst_type: typing.Optional[ALGO_INSTTYPE] = None
    inst_id: typing.Optional[str] = None


class AlgoOrderHistory(RequestModel):
    """Either state or algo_id is required"""
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None
    ord_type: ALGO_ORDERTYPE
    state: typing.Optional[ALGO_ORDERSTATE] = None
    algo_id: typing.Optional[str] = None
    inst_type: typing.Optional[ALGO_INSTTYPE] = None
    inst_id: typing.Optional[str] = None

    @model_validator(mode="after")
    def check_state_or_algo_id(self):
        at_least_one(self, "state", "algo_id")
        return self


# ================================================================================
# ====== FUNDING
# ================================================================================


class TransferState(RequestModel):
    trans_id: str
    type: typing.Optional[TRANSFERTYPE] = None


class AssetBills(RequestModel):
    ccy: typing.Optional[str] = None
    type: typing.Optional[ASSET_BILLTYPE] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None


class LightningDeposit(RequestModel):
    amt: Decimal = Field(..., ge=Decimal("0.000001"), le=Decimal("0.1"))
    to: typing.Optional[LIGHTNING_ACCOUNT] = None
    ccy: str


class DepositHistory(RequestModel):
    ccy: typing.Optional[str] = None
    tx_id: typing.Optional[str] = None
    state: typing.Optional[DEPOSITSTATE] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None


class WithdrawalHistory(RequestModel):
    ccy: typing.Optional[str] = None
    tx_id: typing.Optional[str] = None
    state: typing.Optional[WITHDRAWALSTATE] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None


# ================================================================================
# ====== ACCOUNT
# ================================================================================


class Positions(RequestModel):
    inst_type: typing.Optional[POSITION_INSTTYPE] = None
    inst_id: typing.Optional[str] = None
    pos_id: typing.Optional[str] = None


class Bills(RequestModel):
    inst_type: typing.Optional[INSTTYPE] = None
    ccy: typing.Optional[str] = None
    mgn_mode: typing.Optional[MARGINMODE] = None
    ct_type: typing.Optional[CONTRACTTYPE] = None
    type: typing.Optional[ACCOUNT_BILLTYPE] = None
    sub_type: typing.Optional[ACCOUNT_BILLSUBTYPE] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None


# ================================================================================
# ====== SUBACCOUNT
# ================================================================================


class SubAccountList(RequestModel):
    enable: typing.Optional[SUBACCOUNT_ENABLE] = None
    sub_acct: typing.Optional[str] = None
    after: PAGE = None
    before: PAGE = None
    limit: PAGE = None
