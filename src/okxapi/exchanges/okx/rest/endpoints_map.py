'''Method keys to URL paths, per API version.

Path templates are formatted with the `path_params` given to
`query_public` / `query_private`.
'''


v3 = {
    "base_url": "https://www.okex.com",

    "server_time": "time",

    "public_methods": {
        "time": "/api/general/v3/time",
        "trading_pairs": "/api/spot/v3/instruments",
    },

    "private_methods": {
        # spot
        "spot_account_information": "/api/spot/v3/accounts",
        "spot_currency": "/api/spot/v3/accounts/{currency}",
        "spot_bill_detail": "/api/spot/v3/accounts/{currency}/ledger",
        "spot_order_list": "/api/spot/v3/orders",
        "spot_order_pending": "/api/spot/v3/orders_pending",
        "spot_order_detail": "/api/spot/v3/orders/{order_id}",
        "spot_trade_fee": "/api/spot/v3/trade_fee",
        "spot_transaction_detail": "/api/spot/v3/fills",
        "spot_algo_list": "/api/spot/v3/algo",

        # funding
        "funding_account_information": "/api/account/v3/wallet",
        "funding_sub_account": "/api/account/v3/sub-account",
        "funding_asset_valuation": "/api/account/v3/asset-valuation",
        "funding_currency": "/api/account/v3/wallet/{currency}",
        "funding_transfer_state": "/api/account/v3/transfer/state",
        "withdrawal_history": "/api/account/v3/withdrawal/history",
        "withdrawal_history_currency": "/api/account/v3/withdrawal/history/{currency}",
        "funding_bill_detail": "/api/account/v3/ledger",
        "deposit_address": "/api/account/v3/deposit/address",
        "deposit_history": "/api/account/v3/deposit/history",
        "deposit_history_currency": "/api/account/v3/deposit/history/{currency}",
        "get_currency": "/api/account/v3/currencies",
        "get_user_id": "/api/account/v3/uid",
        "withdrawal_fee": "/api/account/v3/withdrawal/fee",

        # swap
        "swap_position": "/api/swap/v3/position",
        "swap_position_contract": "/api/swap/v3/{instrument_id}/position",
        "swap_account": "/api/swap/v3/accounts",
        "swap_bill_detail": "/api/swap/v3/accounts/{instrument_id}/ledger",
        "swap_order_list": "/api/swap/v3/orders/{instrument_id}",
        "swap_order_detail": "/api/swap/v3/orders/{instrument_id}/{order_id}",
        "swap_transaction_detail": "/api/swap/v3/fills",
        "swap_hold_amount": "/api/swap/v3/accounts/{instrument_id}/holds",
        "swap_trade_fee": "/api/swap/v3/trade_fee",
        "swap_algo_list": "/api/swap/v3/order_algo/{instrument_id}",

        # option
        "option_position": "/api/option/v3/{underlying}/position",
        "option_underlying_account_information": "/api/option/v3/accounts/{underlying}",
        "option_order_information": "/api/option/v3/orders/{underlying}/{order_id}",
        "option_order_list": "/api/option/v3/orders/{underlying}",
        "option_fill": "/api/option/v3/fills/{underlying}",
        "option_bill_detail": "/api/option/v3/accounts/{underlying}/ledger",
        "option_trade_fee": "/api/option/v3/trade_fee",

        # futures
        "future_position": "/api/futures/v3/position",
        "future_account": "/api/futures/v3/accounts",
        "future_order_list": "/api/futures/v3/orders/{instrument_id}",
        "future_order_detail": "/api/futures/v3/orders/{instrument_id}/{order_id}",
        "future_transaction_detail": "/api/futures/v3/fills",
        "future_trade_fee": "/api/futures/v3/trade_fee",
        "future_hold_amount": "/api/futures/v3/accounts/{instrument_id}/holds",

        # margin
        "margin_account": "/api/margin/v3/accounts",
        "margin_account_currency": "/api/margin/v3/accounts/{instrument_id}",
        "margin_bill_detail": "/api/margin/v3/accounts/{instrument_id}/ledger",
        "margin_loan_history": "/api/margin/v3/accounts/borrowed",
        "margin_order_list": "/api/margin/v3/orders",
        "margin_leverage": "/api/margin/v3/accounts/{instrument_id}/leverage",
        "margin_order_detail": "/api/margin/v3/orders/{order_id}",
        "margin_order_pending": "/api/margin/v3/orders_pending",
        "margin_transaction_detail": "/api/margin/v3/fills",
    },

    "unsupported_methods": {},
}


v5 = {
    "base_url": "https://www.okx.com",

    "server_time": "public_data_get_system_time",

    "public_methods": {
        "public_data_get_system_time": "/api/v5/public/time",
        "public_data_get_instruments": "/api/v5/public/instruments",
        "get_delivery_exercise_history": "/api/v5/public/delivery-exercise-history",
        "get_funding_rate_history": "/api/v5/public/funding-rate-history",
    },

    "private_methods": {
        # trade
        "trade_get_order_details": "/api/v5/trade/order",
        "trade_get_order_list": "/api/v5/trade/orders-pending",
        "trade_get_order_history_last_7_days": "/api/v5/trade/orders-history",
        "trade_get_order_history_last_3_months": "/api/v5/trade/orders-history-archive",
        "trade_get_transaction_details_last_3_days": "/api/v5/trade/fills",
        "trade_get_transaction_details_last_3_months": "/api/v5/trade/fills-history",
        "trade_get_algo_order_list": "/api/v5/trade/orders-algo-pending",
        "trade_get_algo_order_history": "/api/v5/trade/orders-algo-history",

        # funding
        "funding_get_currencies": "/api/v5/asset/currencies",
        "funding_get_balance": "/api/v5/asset/balances",
        "funding_get_account_asset_valuation": "/api/v5/asset/asset-valuation",
        "funding_get_funds_transfer_state": "/api/v5/asset/transfer-state",
        "funding_asset_bills_details": "/api/v5/asset/bills",
        "funding_lightning_deposits": "/api/v5/asset/deposit-lightning",
        "funding_get_deposit_address": "/api/v5/asset/deposit-address",
        "funding_get_deposit_history": "/api/v5/asset/deposit-history",
        "funding_get_withdrawal_history": "/api/v5/asset/withdrawal-history",
        "funding_get_saving_balance": "/api/v5/asset/saving-balance",

        # account
        "account_get_balance": "/api/v5/account/balance",
        "account_get_positions": "/api/v5/account/positions",
        "account_get_bills_details_last_7_days": "/api/v5/account/bills",
        "account_get_bills_details_last_3_months": "/api/v5/account/bills-archive",

        # subaccount
        "subaccount_view_sub_account_list": "/api/v5/users/subaccount/list",
        "subaccount_get_sub_account_balance": "/api/v5/account/subaccount/balances",

        # market data, signed even though OKX serves them publicly
        "market_data_get_tickers": "/api/v5/market/tickers",
        "market_data_get_ticker": "/api/v5/market/ticker",
    },

    # documented by OKX, not wrapped
    "unsupported_methods": {
        "funding_get_lending_history": "/api/v5/asset/lending-history",
        "funding_get_public_borrow_info_public": "/api/v5/asset/lending-rate-summary",
        "funding_get_public_borrow_history_public": "/api/v5/asset/lending-rate-history",
        "account_get_account_and_position_risk": "/api/v5/account/account-position-risk",
        "account_get_account_configuration": "/api/v5/account/config",
        "account_get_maximum_buy_sell_amount_or_open_amount": "/api/v5/account/max-size",
        "account_get_maximum_available_tradable_amount": "/api/v5/account/max-avail-size",
        "account_get_leverage": "/api/v5/account/leverage-info",
        "account_get_the_maximum_loan_of_instrument": "/api/v5/account/max-loan",
        "account_get_fee_rates": "/api/v5/account/trade-fee",
        "account_get_interest_accrued_data": "/api/v5/account/interest-accrued",
        "account_get_interest_rate": "/api/v5/account/interest-rate",
        "account_get_maximum_withdrawals": "/api/v5/account/max-withdrawal",
        "account_get_account_risk_state": "/api/v5/account/risk-state",
        "account_get_borrow_and_repay_history_for_vip_loans": "/api/v5/account/borrow-repay-history",
        "account_get_borrow_interest_and_limit": "/api/v5/account/interest-limits",
        "account_get_greeks": "/api/v5/account/greeks",
        "subaccount_query_the_apikey_of_a_sub_account": "/api/v5/users/subaccount/apikey",
        "subaccount_history_of_sub_account_transfer": "/api/v5/asset/subaccount/bills",
        "subaccount_get_custody_trading_sub_account_list": "/api/v5/users/entrust-subaccount-list",
        "market_data_get_index_tickers": "/api/v5/market/index-tickers",
        "market_data_get_order_book": "/api/v5/market/books",
        "market_data_get_candlesticks": "/api/v5/market/candles",
        "market_data_get_candlesticks_history": "/api/v5/market/history-candles",
        "market_data_get_index_candlesticks": "/api/v5/market/index-candles",
        "market_data_get_mark_price_candlesticks": "/api/v5/market/mark-price-candles",
        "market_data_get_trades": "/api/v5/market/trades",
        "market_data_get_24h_total_volume": "/api/v5/market/platform-24-volume",
        "market_data_get_oracle": "/api/v5/market/open-oracle",
        "market_data_get_exchange_rate": "/api/v5/market/exchange-rate",
        "market_data_get_index_components": "/api/v5/market/index-components",
        "trading_data_get_support_coin": "/api/v5/rubik/stat/trading-data/support-coin",
        "trading_data_get_taker_volume": "/api/v5/rubik/stat/taker-volume",
        "trading_data_get_margin_lending_ratio": "/api/v5/rubik/stat/margin/loan-ratio",
        "trading_data_get_long_short_ratio": "/api/v5/rubik/stat/contracts/long-short-account-ratio",
        "trading_data_get_contracts_open_interest_and_volume": "/api/v5/rubik/stat/contracts/open-interest-volume",
        "trading_data_get_options_open_interest_and_volume": "/api/v5/rubik/stat/option/open-interest-volume",
        "trading_data_get_put_call_ratio": "/api/v5/rubik/stat/option/open-interest-volume-ratio",
        "trading_data_get_open_interest_and_volume_expiry": "/api/v5/rubik/stat/option/open-interest-volume-expiry",
        "trading_data_get_open_interest_and_volume_strike": "/api/v5/rubik/stat/option/open-interest-volume-strike",
        "trading_data_get_taker_flow": "/api/v5/rubik/stat/option/taker-block-volume",
        "status": "/api/v5/system/status",
    },
}


endpoints_map = {
    "v3": v3,
    "v5": v5,
}
