# autotrading/exchange/account.py
from .core import url, convert_struct_to_map, request_to_server
from .auth import get_jwt_token, get_jwt_token_with_query
from .models import ReqChance, ReqOrderSearch, ReqOrdersSearch

def get_account(access_key: str, secret_key: str) -> bytes:
    """전체 계좌 조회 (보유 자산 목록)"""
    token = get_jwt_token(access_key, secret_key)
    return request_to_server(url("/v1/accounts"), "GET", token)

def get_order_chance(access_key: str, secret_key: str, query: ReqChance) -> bytes:
    """주문 가능 정보 - 마켓별 주문 가능 정보(수수료, 최소 주문 금액 등) 확인"""
    q = convert_struct_to_map(query)
    token = get_jwt_token_with_query(access_key, secret_key, q)
    return request_to_server(url("/v1/orders/chance"), "GET", token, q)

def get_order_search(access_key: str, secret_key: str, query: ReqOrderSearch) -> bytes:
    """개별 주문 조회 - 주문 uuid(또는 identifier)로 개별 주문건 조회"""
    q = convert_struct_to_map(query)
    token = get_jwt_token_with_query(access_key, secret_key, q)
    return request_to_server(url("/v1/order"), "GET", token, q)

def get_orders_search(access_key: str, secret_key: str, query: ReqOrdersSearch) -> bytes:
    q = convert_struct_to_map(query)
    token = get_jwt_token_with_query(access_key, secret_key, q)
    return request_to_server(url("/v1/orders"), "GET", token, q)
