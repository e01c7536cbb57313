"""OKX Rest API v3
"""
from typing import Optional, Union

import httpx

from okxapi.exchanges.base.rest.api import APIBase
from okxapi.exchanges.base.rest.auth import epoch_seconds_to_ms
from okxapi.models.data.request import v3 as req
from okxapi.models.data.request.base import validate_request
from .endpoints_map import endpoints_map


PAGE = Optional[Union[int, str]]


class OkxV3RestAPI(APIBase):
    """Versioned, path-prefixed API (/api/<product>/v3/...).

    Every private method accepts a keyword `timestamp`: when given, it is used as is
    to sign the request, otherwise server time is fetched first.

    Responses are returned as received (httpx.Response), bodies are not parsed.
    """

    version = "v3"
    endpoints_map = endpoints_map["v3"]


    # ================================================================================
    # ==== TIME
    # ================================================================================


    def _server_time_ms(self, body: dict) -> int:
        # {"iso": "2022-02-07T21:40:25.791Z", "epoch": "1644270025.791"}
        return epoch_seconds_to_ms(body["epoch"])




    # ================================================================================
    # ====== PUBLIC REQUESTS
    # ================================================================================


    async def time(self) -> httpx.Response:
        """API server time"""
        return await self.query_public("time")


    async def trading_pairs(self) -> httpx.Response:
        """List of trading pairs, with their minimum order size and tick sizes"""
        return await self.query_public("trading_pairs")




    # ================================================================================
    # ====== SPOT
    # ================================================================================


    async def spot_account_information(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        """Balance, amount on hold and available amount of every currency in the spot account"""
        return await self.query_private("spot_account_information", timestamp=timestamp)


    async def spot_currency(self, *, currency: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("spot_currency",
                                        path_params={"currency": currency},
                                        timestamp=timestamp)


    async def spot_bill_detail(self,
                               *,
                               currency: str,
                               type: Optional[str] = None,
                               after: PAGE = None,
                               before: PAGE = None,
                               limit: PAGE = req.DEFAULT_LIMIT,
                               timestamp: Optional[str] = None
                               ) -> httpx.Response:
        """Spot account bills, paginated (last 3 months).

        Args:
            currency (str): token symbol, eg "btc"
            type (str): (optional) bill type code, eg "2" for trade
            after (str): (optional) pagination, records earlier than this ledger id
            before (str): (optional) pagination, records newer than this ledger id
            limit (str): number of results, max 100
        """
        params = validate_request(req.SpotLedger, "spot_bill_detail",
                                  type=type, after=after, before=before, limit=limit)

        return await self.query_private("spot_bill_detail",
                                        params=params.to_params(),
                                        path_params={"currency": currency},
                                        timestamp=timestamp)


    async def spot_order_list(self,
                              *,
                              instrument_id: str,
                              state: str,
                              after: PAGE = None,
                              before: PAGE = None,
                              limit: PAGE = req.DEFAULT_LIMIT,
                              timestamp: Optional[str] = None
                              ) -> httpx.Response:
        """Orders of the last 3 months.

        Args:
            instrument_id (str): eg "BTC-USDT"
            state (str): order state code, eg "2" for fully filled, "7" for complete
        """
        params = validate_request(req.InstrumentOrderList, "spot_order_list",
                                  instrument_id=instrument_id, state=state,
                                  after=after, before=before, limit=limit)

        return await self.query_private("spot_order_list", params=params.to_params(), timestamp=timestamp)


    async def spot_order_pending(self,
                                 *,
                                 instrument_id: str,
                                 after: PAGE = None,
                                 before: PAGE = None,
                                 limit: PAGE = req.DEFAULT_LIMIT,
                                 timestamp: Optional[str] = None
                                 ) -> httpx.Response:
        params = {"instrument_id": instrument_id, "after": after, "before": before, "limit": limit}
        return await self.query_private("spot_order_pending", params=params, timestamp=timestamp)


    async def spot_order_detail(self,
                                *,
                                instrument_id: str,
                                client_oid: Optional[str] = None,
                                order_id: Optional[str] = None,
                                timestamp: Optional[str] = None
                                ) -> httpx.Response:
        """Either client_oid or order_id must be present (not both)"""
        ident = validate_request(req.OrderIdentifier, "spot_order_detail",
                                 order_id=order_id, client_oid=client_oid)

        return await self.query_private("spot_order_detail",
                                        params={"instrument_id": instrument_id},
                                        path_params={"order_id": ident.value},
                                        timestamp=timestamp)


    async def spot_trade_fee(self,
                             *,
                             category: Optional[str] = None,
                             instrument_id: Optional[str] = None,
                             timestamp: Optional[str] = None
                             ) -> httpx.Response:
        """Maker and taker fee rates, for a fee tier (category) or an instrument"""
        params = validate_request(req.InstrumentTradeFee, "spot_trade_fee",
                                  instrument_id=instrument_id, category=category)

        return await self.query_private("spot_trade_fee", params=params.to_params(), timestamp=timestamp)


    async def spot_transaction_detail(self,
                                      *,
                                      order_id: Optional[str] = None,
                                      instrument_id: Optional[str] = None,
                                      after: PAGE = None,
                                      before: PAGE = None,
                                      limit: PAGE = req.DEFAULT_LIMIT,
                                      timestamp: Optional[str] = None
                                      ) -> httpx.Response:
        """Fills of the last 3 months"""
        params = {"order_id": order_id, "instrument_id": instrument_id,
                  "after": after, "before": before, "limit": limit}
        return await self.query_private("spot_transaction_detail", params=params, timestamp=timestamp)


    async def spot_algo_list(self,
                             *,
                             instrument_id: str,
                             order_type: str,
                             status: Optional[str] = None,
                             algo_id: Optional[str] = None,
                             after: PAGE = None,
                             before: PAGE = None,
                             limit: PAGE = req.DEFAULT_LIMIT,
                             timestamp: Optional[str] = None
                             ) -> httpx.Response:
        """Algo orders.

        Args:
            order_type (str): "1" trigger, "2" trail, "3" iceberg, "4" time-weighted
            status (str): status code, either status or algo_id must be given (not both)
            algo_id (str): comma separated ids
        """
        params = validate_request(req.SpotAlgoList, "spot_algo_list",
                                  instrument_id=instrument_id, order_type=order_type,
                                  status=status, algo_id=algo_id,
                                  after=after, before=before, limit=limit)

        return await self.query_private("spot_algo_list", params=params.to_params(), timestamp=timestamp)




    # ================================================================================
    # ====== FUNDING
    # ================================================================================


    async def funding_account_information(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        """Balance of every currency in the funding account"""
        return await self.query_private("funding_account_information", timestamp=timestamp)


    async def funding_sub_account(self, *, sub_account: str, timestamp: Optional[str] = None) -> httpx.Response:
        # parameter name contains a dash
        return await self.query_private("funding_sub_account",
                                        params={"sub-account": sub_account},
                                        timestamp=timestamp)


    async def funding_asset_valuation(self,
                                      *,
                                      account_type: Optional[str] = None,
                                      valuation_currency: Optional[str] = None,
                                      timestamp: Optional[str] = None
                                      ) -> httpx.Response:
        """Total asset valuation.

        Args:
            account_type (str): (optional) "0" for all accounts (default), "1" spot, "6" funding ...
            valuation_currency (str): (optional) BTC (default), USD, CNY, JPY, KRW, RUB
        """
        params = validate_request(req.AssetValuation, "funding_asset_valuation",
                                  account_type=account_type, valuation_currency=valuation_currency)

        return await self.query_private("funding_asset_valuation", params=params.to_params(), timestamp=timestamp)


    async def funding_currency(self, *, currency: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("funding_currency",
                                        path_params={"currency": currency},
                                        timestamp=timestamp)


    async def funding_transfer_state(self, *, transfer_id: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("funding_transfer_state",
                                        params={"transfer_id": transfer_id},
                                        timestamp=timestamp)


    async def withdrawal_history(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        """Last 100 withdrawals, all currencies"""
        return await self.query_private("withdrawal_history", timestamp=timestamp)


    async def withdrawal_history_currency(self, *, currency: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("withdrawal_history_currency",
                                        path_params={"currency": currency},
                                        timestamp=timestamp)


    async def funding_bill_detail(self,
                                  *,
                                  currency: Optional[str] = None,
                                  type: Optional[str] = None,
                                  after: PAGE = None,
                                  before: PAGE = None,
                                  limit: PAGE = req.DEFAULT_LIMIT,
                                  timestamp: Optional[str] = None
                                  ) -> httpx.Response:
        """Funding account bills, paginated (last 3 months)"""
        params = validate_request(req.FundingLedger, "funding_bill_detail",
                                  currency=currency, type=type,
                                  after=after, before=before, limit=limit)

        return await self.query_private("funding_bill_detail", params=params.to_params(), timestamp=timestamp)


    async def deposit_address(self, *, currency: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("deposit_address", params={"currency": currency}, timestamp=timestamp)


    async def deposit_history(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        """Last 100 deposits, all currencies"""
        return await self.query_private("deposit_history", timestamp=timestamp)


    async def deposit_history_currency(self,
                                       *,
                                       currency: str,
                                       after: PAGE = None,
                                       before: PAGE = None,
                                       limit: PAGE = req.DEFAULT_LIMIT,
                                       timestamp: Optional[str] = None
                                       ) -> httpx.Response:
        params = {"after": after, "before": before, "limit": limit}
        return await self.query_private("deposit_history_currency",
                                        params=params,
                                        path_params={"currency": currency},
                                        timestamp=timestamp)


    async def get_currency(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        """Currencies available on OKX, not every one of them is tradable"""
        return await self.query_private("get_currency", timestamp=timestamp)


    async def get_user_id(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("get_user_id", timestamp=timestamp)


    async def withdrawal_fee(self, *, currency: Optional[str] = None, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("withdrawal_fee", params={"currency": currency}, timestamp=timestamp)




    # ================================================================================
    # ====== SWAP
    # ================================================================================


    async def swap_position(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("swap_position", timestamp=timestamp)


    async def swap_position_contract(self, *, instrument_id: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("swap_position_contract",
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)


    async def swap_account(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("swap_account", timestamp=timestamp)


    async def swap_bill_detail(self,
                               *,
                               instrument_id: str,
                               type: Optional[str] = None,
                               after: PAGE = None,
                               before: PAGE = None,
                               limit: PAGE = req.DEFAULT_LIMIT,
                               timestamp: Optional[str] = None
                               ) -> httpx.Response:
        params = validate_request(req.SwapLedger, "swap_bill_detail",
                                  type=type, after=after, before=before, limit=limit)

        return await self.query_private("swap_bill_detail",
                                        params=params.to_params(),
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)


    async def swap_order_list(self,
                              *,
                              instrument_id: str,
                              state: str,
                              after: PAGE = None,
                              before: PAGE = None,
                              limit: PAGE = req.DEFAULT_LIMIT,
                              timestamp: Optional[str] = None
                              ) -> httpx.Response:
        params = validate_request(req.OrderList, "swap_order_list",
                                  state=state, after=after, before=before, limit=limit)

        return await self.query_private("swap_order_list",
                                        params=params.to_params(),
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)


    async def swap_order_detail(self,
                                *,
                                instrument_id: str,
                                client_oid: Optional[str] = None,
                                order_id: Optional[str] = None,
                                timestamp: Optional[str] = None
                                ) -> httpx.Response:
        """Either client_oid or order_id must be present (not both)"""
        ident = validate_request(req.OrderIdentifier, "swap_order_detail",
                                 order_id=order_id, client_oid=client_oid)

        return await self.query_private("swap_order_detail",
                                        path_params={"instrument_id": instrument_id, "order_id": ident.value},
                                        timestamp=timestamp)


    async def swap_transaction_detail(self,
                                      *,
                                      instrument_id: str,
                                      order_id: Optional[str] = None,
                                      after: PAGE = None,
                                      before: PAGE = None,
                                      limit: PAGE = req.DEFAULT_LIMIT,
                                      timestamp: Optional[str] = None
                                      ) -> httpx.Response:
        params = {"instrument_id": instrument_id, "order_id": order_id,
                  "after": after, "before": before, "limit": limit}
        return await self.query_private("swap_transaction_detail", params=params, timestamp=timestamp)


    async def swap_hold_amount(self, *, instrument_id: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("swap_hold_amount",
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)


    async def swap_trade_fee(self,
                             *,
                             category: Optional[str] = None,
                             instrument_id: Optional[str] = None,
                             timestamp: Optional[str] = None
                             ) -> httpx.Response:
        params = validate_request(req.InstrumentTradeFee, "swap_trade_fee",
                                  instrument_id=instrument_id, category=category)

        return await self.query_private("swap_trade_fee", params=params.to_params(), timestamp=timestamp)


    async def swap_algo_list(self,
                             *,
                             instrument_id: str,
                             order_type: str,
                             status: Optional[str] = None,
                             algo_id: Optional[str] = None,
                             after: PAGE = None,
                             before: PAGE = None,
                             limit: PAGE = req.DEFAULT_LIMIT,
                             timestamp: Optional[str] = None
                             ) -> httpx.Response:
        params = validate_request(req.SwapAlgoList, "swap_algo_list",
                                  order_type=order_type, status=status, algo_id=algo_id,
                                  after=after, before=before, limit=limit)

        return await self.query_private("swap_algo_list",
                                        params=params.to_params(),
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)




    # ================================================================================
    # ====== OPTION
    # ================================================================================


    async def option_position(self,
                              *,
                              underlying: str,
                              instrument_id: Optional[str] = None,
                              timestamp: Optional[str] = None
                              ) -> httpx.Response:
        return await self.query_private("option_position",
                                        params={"instrument_id": instrument_id},
                                        path_params={"underlying": underlying},
                                        timestamp=timestamp)


    async def option_underlying_account_information(self, *, underlying: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("option_underlying_account_information",
                                        path_params={"underlying": underlying},
                                        timestamp=timestamp)


    async def option_order_information(self,
                                       *,
                                       underlying: str,
                                       order_id: Optional[str] = None,
                                       client_oid: Optional[str] = None,
                                       timestamp: Optional[str] = None
                                       ) -> httpx.Response:
        """Either client_oid or order_id must be present (not both)"""
        ident = validate_request(req.OrderIdentifier, "option_order_information",
                                 order_id=order_id, client_oid=client_oid)

        return await self.query_private("option_order_information",
                                        path_params={"underlying": underlying, "order_id": ident.value},
                                        timestamp=timestamp)


    async def option_order_list(self,
                                *,
                                underlying: str,
                                state: str,
                                instrument_id: Optional[str] = None,
                                after: PAGE = None,
                                before: PAGE = None,
                                limit: PAGE = req.DEFAULT_LIMIT,
                                timestamp: Optional[str] = None
                                ) -> httpx.Response:
        params = validate_request(req.OptionOrderList, "option_order_list",
                                  state=state, instrument_id=instrument_id,
                                  after=after, before=before, limit=limit)

        return await self.query_private("option_order_list",
                                        params=params.to_params(),
                                        path_params={"underlying": underlying},
                                        timestamp=timestamp)


    async def option_fill(self,
                          *,
                          underlying: str,
                          order_id: Optional[str] = None,
                          instrument_id: Optional[str] = None,
                          after: PAGE = None,
                          before: PAGE = None,
                          limit: PAGE = req.DEFAULT_LIMIT,
                          timestamp: Optional[str] = None
                          ) -> httpx.Response:
        params = {"order_id": order_id, "instrument_id": instrument_id,
                  "after": after, "before": before, "limit": limit}
        return await self.query_private("option_fill",
                                        params=params,
                                        path_params={"underlying": underlying},
                                        timestamp=timestamp)


    async def option_bill_detail(self,
                                 *,
                                 underlying: str,
                                 after: PAGE = None,
                                 before: PAGE = None,
                                 limit: PAGE = req.DEFAULT_LIMIT,
                                 timestamp: Optional[str] = None
                                 ) -> httpx.Response:
        params = {"after": after, "before": before, "limit": limit}
        return await self.query_private("option_bill_detail",
                                        params=params,
                                        path_params={"underlying": underlying},
                                        timestamp=timestamp)


    async def option_trade_fee(self,
                               *,
                               category: Optional[str] = None,
                               underlying: Optional[str] = None,
                               timestamp: Optional[str] = None
                               ) -> httpx.Response:
        params = validate_request(req.UnderlyingTradeFee, "option_trade_fee",
                                  category=category, underlying=underlying)

        return await self.query_private("option_trade_fee", params=params.to_params(), timestamp=timestamp)




    # ================================================================================
    # ====== FUTURES
    # ================================================================================


    async def future_position(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("future_position", timestamp=timestamp)


    async def future_account(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("future_account", timestamp=timestamp)


    async def future_order_list(self,
                                *,
                                instrument_id: str,
                                state: str,
                                after: PAGE = None,
                                before: PAGE = None,
                                limit: PAGE = req.DEFAULT_LIMIT,
                                timestamp: Optional[str] = None
                                ) -> httpx.Response:
        params = validate_request(req.OrderList, "future_order_list",
                                  state=state, after=after, before=before, limit=limit)

        return await self.query_private("future_order_list",
                                        params=params.to_params(),
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)


    async def future_order_detail(self,
                                  *,
                                  instrument_id: str,
                                  order_id: Optional[str] = None,
                                  client_oid: Optional[str] = None,
                                  timestamp: Optional[str] = None
                                  ) -> httpx.Response:
        """Either client_oid or order_id must be present (not both)"""
        ident = validate_request(req.OrderIdentifier, "future_order_detail",
                                 order_id=order_id, client_oid=client_oid)

        return await self.query_private("future_order_detail",
                                        path_params={"instrument_id": instrument_id, "order_id": ident.value},
                                        timestamp=timestamp)


    async def future_transaction_detail(self,
                                        *,
                                        instrument_id: str,
                                        order_id: str,
                                        after: PAGE = None,
                                        before: PAGE = None,
                                        limit: PAGE = req.DEFAULT_LIMIT,
                                        timestamp: Optional[str] = None
                                        ) -> httpx.Response:
        params = {"instrument_id": instrument_id, "order_id": order_id,
                  "after": after, "before": before, "limit": limit}
        return await self.query_private("future_transaction_detail", params=params, timestamp=timestamp)


    async def future_trade_fee(self,
                               *,
                               category: Optional[str] = None,
                               underlying: Optional[str] = None,
                               timestamp: Optional[str] = None
                               ) -> httpx.Response:
        params = validate_request(req.UnderlyingTradeFee, "future_trade_fee",
                                  category=category, underlying=underlying)

        return await self.query_private("future_trade_fee", params=params.to_params(), timestamp=timestamp)


    async def future_hold_amount(self, *, instrument_id: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("future_hold_amount",
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)




    # ================================================================================
    # ====== MARGIN
    # ================================================================================


    async def margin_account(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("margin_account", timestamp=timestamp)


    async def margin_account_currency(self, *, instrument_id: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("margin_account_currency",
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)


    async def margin_bill_detail(self,
                                 *,
                                 instrument_id: str,
                                 after: PAGE = None,
                                 before: PAGE = None,
                                 limit: PAGE = req.DEFAULT_LIMIT,
                                 type: Optional[str] = None,
                                 timestamp: Optional[str] = None
                                 ) -> httpx.Response:
        params = validate_request(req.MarginLedger, "margin_bill_detail",
                                  after=after, before=before, limit=limit, type=type)

        return await self.query_private("margin_bill_detail",
                                        params=params.to_params(),
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)


    async def margin_loan_history(self,
                                  *,
                                  status: str,
                                  after: PAGE = None,
                                  before: PAGE = None,
                                  limit: PAGE = req.DEFAULT_LIMIT,
                                  timestamp: Optional[str] = None
                                  ) -> httpx.Response:
        """Loan history.

        Args:
            status (str): "0" outstanding, "1" repaid
        """
        params = validate_request(req.MarginLoanHistory, "margin_loan_history",
                                  status=status, after=after, before=before, limit=limit)

        return await self.query_private("margin_loan_history", params=params.to_params(), timestamp=timestamp)


    async def margin_order_list(self,
                                *,
                                instrument_id: str,
                                state: str,
                                after: PAGE = None,
                                before: PAGE = None,
                                limit: PAGE = req.DEFAULT_LIMIT,
                                timestamp: Optional[str] = None
                                ) -> httpx.Response:
        params = validate_request(req.InstrumentOrderList, "margin_order_list",
                                  instrument_id=instrument_id, state=state,
                                  after=after, before=before, limit=limit)

        return await self.query_private("margin_order_list", params=params.to_params(), timestamp=timestamp)


    async def margin_leverage(self, *, instrument_id: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("margin_leverage",
                                        path_params={"instrument_id": instrument_id},
                                        timestamp=timestamp)


    async def margin_order_detail(self,
                                  *,
                                  instrument_id: str,
                                  order_id: Optional[str] = None,
                                  client_oid: Optional[str] = None,
                                  timestamp: Optional[str] = None
                                  ) -> httpx.Response:
        """Either client_oid or order_id must be present (not both)"""
        ident = validate_request(req.OrderIdentifier, "margin_order_detail",
                                 order_id=order_id, client_oid=client_oid)

        return await self.query_private("margin_order_detail",
                                        params={"instrument_id": instrument_id},
                                        path_params={"order_id": ident.value},
                                        timestamp=timestamp)


    async def margin_order_pending(self,
                                   *,
                                   instrument_id: str,
                                   after: PAGE = None,
                                   before: PAGE = None,
                                   limit: PAGE = req.DEFAULT_LIMIT,
                                   timestamp: Optional[str] = None
                                   ) -> httpx.Response:
        params = {"instrument_id": instrument_id, "after": after, "before": before, "limit": limit}
        return await self.query_private("margin_order_pending", params=params, timestamp=timestamp)


    async def margin_transaction_detail(self,
                                        *,
                                        instrument_id: str,
                                        order_id: Optional[str] = None,
                                        after: PAGE = None,
                                        before: PAGE = None,
                                        limit: PAGE = req.DEFAULT_LIMIT,
                                        timestamp: Optional[str] = None
                                        ) -> httpx.Response:
        params = {"instrument_id": instrument_id, "order_id": order_id,
                  "after": after, "before": before, "limit": limit}
        return await self.query_private("margin_transaction_detail", params=params, timestamp=timestamp)
