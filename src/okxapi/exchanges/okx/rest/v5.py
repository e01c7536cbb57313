"""OKX Rest API v5
"""
from decimal import Decimal
from typing import Optional, Union

import httpx

from okxapi.exchanges.base.rest.api import APIBase
from okxapi.models.data.base.response import UnsupportedResponse
from okxapi.models.data.request import v5 as req
from okxapi.models.data.request.base import validate_request
from .endpoints_map import endpoints_map


PAGE = Optional[Union[int, str]]


def snake_to_lower_camel(text: str) -> str:
    """"inst_type" ==> "instType" """
    first, *others = str(text).split("_")
    return first + "".join(word.capitalize() for word in others)


class OkxV5RestAPI(APIBase):
    """Unified API (/api/v5/...).

    Arguments are snake_case, they are sent as lowerCamelCase query parameters.
    Every private method accepts a keyword `timestamp`: when given, it is used as is
    to sign the request, otherwise server time is fetched first.

    Responses are returned as received (httpx.Response), bodies are not parsed.
    Endpoints that are not wrapped return an `UnsupportedResponse` without sending anything.
    """

    version = "v5"
    endpoints_map = endpoints_map["v5"]


    # ================================================================================
    # ==== TIME
    # ================================================================================


    def _server_time_ms(self, body: dict) -> int:
        # {"code": "0", "data": [{"ts": "1644499170774"}], "msg": ""}
        return int(body["data"][0]["ts"])




    # ================================================================================
    # ==== UTILS
    # ================================================================================


    def _query_key(self, key: str) -> str:
        return snake_to_lower_camel(key)




    # ================================================================================
    # ====== PUBLIC DATA
    # ================================================================================


    async def public_data_get_system_time(self) -> httpx.Response:
        return await self.query_public("public_data_get_system_time")


    async def public_data_get_instruments(self,
                                          *,
                                          inst_type: str,
                                          uly: Optional[str] = None,
                                          inst_id: Optional[str] = None
                                          ) -> httpx.Response:
        """Instruments of a given type.

        Args:
            inst_type (str): SPOT, MARGIN, SWAP, FUTURES, OPTION
            uly (str): underlying, required for OPTION, only applicable to FUTURES/SWAP/OPTION
            inst_id (str): (optional)
        """
        params = validate_request(req.Instruments, "public_data_get_instruments",
                                  inst_type=inst_type, uly=uly, inst_id=inst_id)

        return await self.query_public("public_data_get_instruments", params=params.to_params())


    async def get_delivery_exercise_history(self,
                                            *,
                                            inst_type: str,
                                            uly: str,
                                            after: PAGE = None,
                                            before: PAGE = None,
                                            limit: PAGE = None
                                            ) -> httpx.Response:
        """Delivery records of futures and exercise records of options, last 3 months"""
        params = validate_request(req.DeliveryExerciseHistory, "get_delivery_exercise_history",
                                  inst_type=inst_type, uly=uly,
                                  after=after, before=before, limit=limit)

        return await self.query_public("get_delivery_exercise_history", params=params.to_params())


    async def get_funding_rate_history(self,
                                       *,
                                       inst_id: str,
                                       after: PAGE = None,
                                       before: PAGE = None,
                                       limit: PAGE = None
                                       ) -> httpx.Response:
        """Funding rates of a perpetual swap, last 3 months

        Args:
            inst_id (str): eg "BTC-USD-SWAP"
        """
        params = validate_request(req.FundingRateHistory, "get_funding_rate_history",
                                  inst_id=inst_id, after=after, before=before, limit=limit)

        return await self.query_public("get_funding_rate_history", params=params.to_params())




    # ================================================================================
    # ====== TRADE
    # ================================================================================


    async def trade_get_order_details(self,
                                      *,
                                      inst_id: str,
                                      ord_id: Optional[str] = None,
                                      cl_ord_id: Optional[str] = None,
                                      timestamp: Optional[str] = None
                                      ) -> httpx.Response:
        """Either ord_id or cl_ord_id is required, if both are passed, ord_id will be used"""
        params = validate_request(req.OrderDetails, "trade_get_order_details",
                                  inst_id=inst_id, ord_id=ord_id, cl_ord_id=cl_ord_id)

        return await self.query_private("trade_get_order_details", params=params.to_params(), timestamp=timestamp)


    async def trade_get_order_list(self,
                                   *,
                                   inst_type: Optional[str] = None,
                                   uly: Optional[str] = None,
                                   inst_id: Optional[str] = None,
                                   ord_type: Optional[str] = None,
                                   state: Optional[str] = None,
                                   after: PAGE = None,
                                   before: PAGE = None,
                                   limit: PAGE = None,
                                   timestamp: Optional[str] = None
                                   ) -> httpx.Response:
        """Incomplete orders of the current account"""
        params = validate_request(req.OrderList, "trade_get_order_list",
                                  inst_type=inst_type, uly=uly, inst_id=inst_id,
                                  ord_type=ord_type, state=state,
                                  after=after, before=before, limit=limit)

        return await self.query_private("trade_get_order_list", params=params.to_params(), timestamp=timestamp)


    async def _order_history(self, method: str, timestamp: Optional[str], **kwargs) -> httpx.Response:
        params = validate_request(req.OrderHistory, method, **kwargs)
        return await self.query_private(method, params=params.to_params(), timestamp=timestamp)


    async def trade_get_order_history_last_7_days(self,
                                                  *,
                                                  inst_type: str,
                                                  uly: Optional[str] = None,
                                                  inst_id: Optional[str] = None,
                                                  ord_type: Optional[str] = None,
                                                  state: Optional[str] = None,
                                                  category: Optional[str] = None,
                                                  after: PAGE = None,
                                                  before: PAGE = None,
                                                  limit: PAGE = None,
                                                  timestamp: Optional[str] = None
                                                  ) -> httpx.Response:
        """Completed orders of the last 7 days (canceled orders kept 2 hours only)"""
        return await self._order_history("trade_get_order_history_last_7_days", timestamp,
                                         inst_type=inst_type, uly=uly, inst_id=inst_id,
                                         ord_type=ord_type, state=state, category=category,
                                         after=after, before=before, limit=limit)


    async def trade_get_order_history_last_3_months(self,
                                                    *,
                                                    inst_type: str,
                                                    uly: Optional[str] = None,
                                                    inst_id: Optional[str] = None,
                                                    ord_type: Optional[str] = None,
                                                    state: Optional[str] = None,
                                                    category: Optional[str] = None,
                                                    after: PAGE = None,
                                                    before: PAGE = None,
                                                    limit: PAGE = None,
                                                    timestamp: Optional[str] = None
                                                    ) -> httpx.Response:
        """Completed orders of the last 3 months"""
        return await self._order_history("trade_get_order_history_last_3_months", timestamp,
                                         inst_type=inst_type, uly=uly, inst_id=inst_id,
                                         ord_type=ord_type, state=state, category=category,
                                         after=after, before=before, limit=limit)


    async def trade_get_transaction_details_last_3_days(self,
                                                        *,
                                                        inst_type: Optional[str] = None,
                                                        uly: Optional[str] = None,
                                                        inst_id: Optional[str] = None,
                                                        ord_id: Optional[str] = None,
                                                        after: PAGE = None,
                                                        before: PAGE = None,
                                                        limit: PAGE = None,
                                                        timestamp: Optional[str] = None
                                                        ) -> httpx.Response:
        """Fills of the last 3 days"""
        params = validate_request(req.RecentFills, "trade_get_transaction_details_last_3_days",
                                  inst_type=inst_type, uly=uly, inst_id=inst_id, ord_id=ord_id,
                                  after=after, before=before, limit=limit)

        return await self.query_private("trade_get_transaction_details_last_3_days",
                                        params=params.to_params(),
                                        timestamp=timestamp)


    async def trade_get_transaction_details_last_3_months(self,
                                                          *,
                                                          inst_type: str,
                                                          uly: Optional[str] = None,
                                                          inst_id: Optional[str] = None,
                                                          ord_id: Optional[str] = None,
                                                          after: PAGE = None,
                                                          before: PAGE = None,
                                                          limit: PAGE = None,
                                                          timestamp: Optional[str] = None
                                                          ) -> httpx.Response:
        """Fills of the last 3 months"""
        params = validate_request(req.FillsHistory, "trade_get_transaction_details_last_3_months",
                                  inst_type=inst_type, uly=uly, inst_id=inst_id, ord_id=ord_id,
                                  after=after, before=before, limit=limit)

        return await self.query_private("trade_get_transaction_details_last_3_months",
                                        params=params.to_params(),
                                        timestamp=timestamp)


    async def trade_get_algo_order_list(self,
                                        *,
                                        ord_type: str,
                                        algo_id: Optional[str] = None,
                                        inst_type: Optional[str] = None,
                                        inst_id: Optional[str] = None,
                                        after: PAGE = None,
                                        before: PAGE = None,
                                        limit: PAGE = None,
                                        timestamp: Optional[str] = None
                                        ) -> httpx.Response:
        """Untriggered algo orders"""
        params = validate_request(req.AlgoOrderList, "trade_get_algo_order_list",
                                  after=after, before=before, limit=limit,
                                  ord_type=ord_type, algo_id=algo_id,
                                  inst_type=inst_type, inst_id=inst_id)

        return await self.query_private("trade_get_algo_order_list", params=params.to_params(), timestamp=timestamp)


    async def trade_get_algo_order_history(self,
                                           *,
                                           ord_type: str,
                                           state: Optional[str] = None,
                                           algo_id: Optional[str] = None,
                                           inst_type: Optional[str] = None,
                                           inst_id: Optional[str] = None,
                                           after: PAGE = None,
                                           before: PAGE = None,
                                           limit: PAGE = None,
                                           timestamp: Optional[str] = None
                                           ) -> httpx.Response:
        """Algo orders of the last 3 months, either state or algo_id is required"""
        params = validate_request(req.AlgoOrderHistory, "trade_get_algo_order_history",
                                  after=after, before=before, limit=limit,
                                  ord_type=ord_type, state=state, algo_id=algo_id,
                                  inst_type=inst_type, inst_id=inst_id)

        return await self.query_private("trade_get_algo_order_history", params=params.to_params(), timestamp=timestamp)




    # ================================================================================
    # ====== FUNDING
    # ================================================================================


    async def funding_get_currencies(self, *, timestamp: Optional[str] = None) -> httpx.Response:
        """Currencies available, not all of them may be used for trading"""
        return await self.query_private("funding_get_currencies", timestamp=timestamp)


    async def funding_get_balance(self, *, ccy: Optional[str] = None, timestamp: Optional[str] = None) -> httpx.Response:
        """Balances of the funding account

        Args:
            ccy (str): (optional) single currency or comma separated list, eg "BTC,ETH"
        """
        return await self.query_private("funding_get_balance", params={"ccy": ccy}, timestamp=timestamp)


    async def funding_get_account_asset_valuation(self, *, ccy: Optional[str] = None, timestamp: Optional[str] = None) -> httpx.Response:
        """Valuation of total assets, in BTC by default"""
        return await self.query_private("funding_get_account_asset_valuation", params={"ccy": ccy}, timestamp=timestamp)


    async def funding_get_funds_transfer_state(self,
                                               *,
                                               trans_id: str,
                                               type: Optional[int] = None,
                                               timestamp: Optional[str] = None
                                               ) -> httpx.Response:
        params = validate_request(req.TransferState, "funding_get_funds_transfer_state",
                                  trans_id=trans_id, type=type)

        return await self.query_private("funding_get_funds_transfer_state", params=params.to_params(), timestamp=timestamp)


    async def funding_asset_bills_details(self,
                                          *,
                                          ccy: Optional[str] = None,
                                          type: Optional[int] = None,
                                          after: PAGE = None,
                                          before: PAGE = None,
                                          limit: PAGE = None,
                                          timestamp: Optional[str] = None
                                          ) -> httpx.Response:
        """Bills of the funding account, last 3 months"""
        params = validate_request(req.AssetBills, "funding_asset_bills_details",
                                  ccy=ccy, type=type, after=after, before=before, limit=limit)

        return await self.query_private("funding_asset_bills_details", params=params.to_params(), timestamp=timestamp)


    async def funding_lightning_deposits(self,
                                         *,
                                         ccy: str,
                                         amt: Union[Decimal, float, str],
                                         to: Optional[int] = None,
                                         timestamp: Optional[str] = None
                                         ) -> httpx.Response:
        """Lightning deposit invoice.

        Args:
            ccy (str): only "BTC"
            amt (Decimal): between 0.000001 and 0.1
            to (int): (optional) receiving account, 6 funding (default), 1 spot
        """
        params = validate_request(req.LightningDeposit, "funding_lightning_deposits",
                                  amt=amt, to=to, ccy=ccy)

        return await self.query_private("funding_lightning_deposits", params=params.to_params(), timestamp=timestamp)


    async def funding_get_deposit_address(self, *, ccy: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("funding_get_deposit_address", params={"ccy": ccy}, timestamp=timestamp)


    async def funding_get_deposit_history(self,
                                          *,
                                          ccy: Optional[str] = None,
                                          tx_id: Optional[str] = None,
                                          state: Optional[int] = None,
                                          after: PAGE = None,
                                          before: PAGE = None,
                                          limit: PAGE = None,
                                          timestamp: Optional[str] = None
                                          ) -> httpx.Response:
        """Deposits, newest first, 100 at most"""
        params = validate_request(req.DepositHistory, "funding_get_deposit_history",
                                  ccy=ccy, tx_id=tx_id, state=state,
                                  after=after, before=before, limit=limit)

        return await self.query_private("funding_get_deposit_history", params=params.to_params(), timestamp=timestamp)


    async def funding_get_withdrawal_history(self,
                                             *,
                                             ccy: Optional[str] = None,
                                             tx_id: Optional[str] = None,
                                             state: Optional[int] = None,
                                             after: PAGE = None,
                                             before: PAGE = None,
                                             limit: PAGE = None,
                                             timestamp: Optional[str] = None
                                             ) -> httpx.Response:
        """Withdrawals, newest first, 100 at most"""
        params = validate_request(req.WithdrawalHistory, "funding_get_withdrawal_history",
                                  ccy=ccy, tx_id=tx_id, state=state,
                                  after=after, before=before, limit=limit)

        return await self.query_private("funding_get_withdrawal_history", params=params.to_params(), timestamp=timestamp)


    async def funding_get_saving_balance(self, *, ccy: Optional[str] = None, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("funding_get_saving_balance", params={"ccy": ccy}, timestamp=timestamp)


    async def funding_get_lending_history(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("funding_get_lending_history")


    async def funding_get_public_borrow_info_public(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("funding_get_public_borrow_info_public")


    async def funding_get_public_borrow_history_public(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("funding_get_public_borrow_history_public")




    # ================================================================================
    # ====== ACCOUNT
    # ================================================================================


    async def account_get_balance(self, *, ccy: Optional[str] = None, timestamp: Optional[str] = None) -> httpx.Response:
        """Balances of the trading account

        Args:
            ccy (str): (optional) single currency or comma separated list, eg "BTC,ETH"
        """
        return await self.query_private("account_get_balance", params={"ccy": ccy}, timestamp=timestamp)


    async def account_get_positions(self,
                                    *,
                                    inst_type: Optional[str] = None,
                                    inst_id: Optional[str] = None,
                                    pos_id: Optional[str] = None,
                                    timestamp: Optional[str] = None
                                    ) -> httpx.Response:
        params = validate_request(req.Positions, "account_get_positions",
                                  inst_type=inst_type, inst_id=inst_id, pos_id=pos_id)

        return await self.query_private("account_get_positions", params=params.to_params(), timestamp=timestamp)


    async def account_get_account_and_position_risk(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_account_and_position_risk")


    async def _bills(self, method: str, timestamp: Optional[str], **kwargs) -> httpx.Response:
        params = validate_request(req.Bills, method, **kwargs)
        return await self.query_private(method, params=params.to_params(), timestamp=timestamp)


    async def account_get_bills_details_last_7_days(self,
                                                    *,
                                                    inst_type: Optional[str] = None,
                                                    ccy: Optional[str] = None,
                                                    mgn_mode: Optional[str] = None,
                                                    ct_type: Optional[str] = None,
                                                    type: Optional[int] = None,
                                                    sub_type: Optional[int] = None,
                                                    after: PAGE = None,
                                                    before: PAGE = None,
                                                    limit: PAGE = None,
                                                    timestamp: Optional[str] = None
                                                    ) -> httpx.Response:
        """Bills of the trading account, last 7 days"""
        return await self._bills("account_get_bills_details_last_7_days", timestamp,
                                 inst_type=inst_type, ccy=ccy, mgn_mode=mgn_mode, ct_type=ct_type,
                                 type=type, sub_type=sub_type,
                                 after=after, before=before, limit=limit)


    async def account_get_bills_details_last_3_months(self,
                                                      *,
                                                      inst_type: Optional[str] = None,
                                                      ccy: Optional[str] = None,
                                                      mgn_mode: Optional[str] = None,
                                                      ct_type: Optional[str] = None,
                                                      type: Optional[int] = None,
                                                      sub_type: Optional[int] = None,
                                                      after: PAGE = None,
                                                      before: PAGE = None,
                                                      limit: PAGE = None,
                                                      timestamp: Optional[str] = None
                                                      ) -> httpx.Response:
        """Bills of the trading account, last 3 months"""
        return await self._bills("account_get_bills_details_last_3_months", timestamp,
                                 inst_type=inst_type, ccy=ccy, mgn_mode=mgn_mode, ct_type=ct_type,
                                 type=type, sub_type=sub_type,
                                 after=after, before=before, limit=limit)


    async def account_get_account_configuration(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_account_configuration")


    async def account_get_maximum_buy_sell_amount_or_open_amount(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_maximum_buy_sell_amount_or_open_amount")


    async def account_get_maximum_available_tradable_amount(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_maximum_available_tradable_amount")


    async def account_get_leverage(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_leverage")


    async def account_get_the_maximum_loan_of_instrument(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_the_maximum_loan_of_instrument")


    async def account_get_fee_rates(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_fee_rates")


    async def account_get_interest_accrued_data(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_interest_accrued_data")


    async def account_get_interest_rate(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_interest_rate")


    async def account_get_maximum_withdrawals(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_maximum_withdrawals")


    async def account_get_account_risk_state(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_account_risk_state")


    async def account_get_borrow_and_repay_history_for_vip_loans(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_borrow_and_repay_history_for_vip_loans")


    async def account_get_borrow_interest_and_limit(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_borrow_interest_and_limit")


    async def account_get_greeks(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("account_get_greeks")




    # ================================================================================
    # ====== SUBACCOUNT
    # ================================================================================


    async def subaccount_view_sub_account_list(self,
                                               *,
                                               enable: Optional[str] = None,
                                               sub_acct: Optional[str] = None,
                                               after: PAGE = None,
                                               before: PAGE = None,
                                               limit: PAGE = None,
                                               timestamp: Optional[str] = None
                                               ) -> httpx.Response:
        """Sub-accounts of the master account

        Args:
            enable (str): (optional) "true" or "false"
        """
        params = validate_request(req.SubAccountList, "subaccount_view_sub_account_list",
                                  enable=enable, sub_acct=sub_acct,
                                  after=after, before=before, limit=limit)

        return await self.query_private("subaccount_view_sub_account_list", params=params.to_params(), timestamp=timestamp)


    async def subaccount_query_the_apikey_of_a_sub_account(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("subaccount_query_the_apikey_of_a_sub_account")


    async def subaccount_get_sub_account_balance(self, *, sub_acct: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("subaccount_get_sub_account_balance",
                                        params={"sub_acct": sub_acct},
                                        timestamp=timestamp)


    async def subaccount_history_of_sub_account_transfer(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("subaccount_history_of_sub_account_transfer")


    async def subaccount_get_custody_trading_sub_account_list(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("subaccount_get_custody_trading_sub_account_list")




    # ================================================================================
    # ====== MARKET DATA
    # ================================================================================


    async def market_data_get_tickers(self,
                                      *,
                                      inst_type: str,
                                      uly: Optional[str] = None,
                                      timestamp: Optional[str] = None
                                      ) -> httpx.Response:
        """Latest price snapshot, best bid/ask and 24h volume of every instrument of a type"""
        params = validate_request(req.Tickers, "market_data_get_tickers", inst_type=inst_type, uly=uly)

        return await self.query_private("market_data_get_tickers", params=params.to_params(), timestamp=timestamp)


    async def market_data_get_ticker(self, *, inst_id: str, timestamp: Optional[str] = None) -> httpx.Response:
        return await self.query_private("market_data_get_ticker", params={"inst_id": inst_id}, timestamp=timestamp)


    async def market_data_get_index_tickers(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_index_tickers")


    async def market_data_get_order_book(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_order_book")


    async def market_data_get_candlesticks(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_candlesticks")


    async def market_data_get_candlesticks_history(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_candlesticks_history")


    async def market_data_get_index_candlesticks(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_index_candlesticks")


    async def market_data_get_mark_price_candlesticks(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_mark_price_candlesticks")


    async def market_data_get_trades(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_trades")


    async def market_data_get_24h_total_volume(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_24h_total_volume")


    async def market_data_get_oracle(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_oracle")


    async def market_data_get_exchange_rate(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_exchange_rate")


    async def market_data_get_index_components(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("market_data_get_index_components")




    # ================================================================================
    # ====== TRADING DATA
    # ================================================================================


    async def trading_data_get_support_coin(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_support_coin")


    async def trading_data_get_taker_volume(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_taker_volume")


    async def trading_data_get_margin_lending_ratio(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_margin_lending_ratio")


    async def trading_data_get_long_short_ratio(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_long_short_ratio")


    async def trading_data_get_contracts_open_interest_and_volume(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_contracts_open_interest_and_volume")


    async def trading_data_get_options_open_interest_and_volume(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_options_open_interest_and_volume")


    async def trading_data_get_put_call_ratio(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_put_call_ratio")


    async def trading_data_get_open_interest_and_volume_expiry(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_open_interest_and_volume_expiry")


    async def trading_data_get_open_interest_and_volume_strike(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_open_interest_and_volume_strike")


    async def trading_data_get_taker_flow(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("trading_data_get_taker_flow")




    # ================================================================================
    # ====== STATUS
    # ================================================================================


    async def status(self, *args, **kwargs) -> UnsupportedResponse:
        return self.unsupported("status")
