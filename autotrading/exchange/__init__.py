# autotrading/exchange/__init__.py
from .core import UpbitRequestError, configure, request_to_server, request_to_server_simple, convert_struct_to_map
from .auth import get_jwt_token, get_jwt_token_with_query
from .account import get_account, get_order_chance, get_order_search, get_orders_search
from .orders import delete_order, post_order
from .market import (get_market_code, get_minute_candles, get_day_candles,
                     get_week_candles, get_months_candles, candles_to_frame)
