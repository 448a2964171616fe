# autotrading/exchange/orders.py
from .core import url, convert_struct_to_map, request_to_server
from .auth import get_jwt_token_with_query
from .models import ReqDeleteOrder, ReqOrders

def delete_order(access_key: str, secret_key: str, query: ReqDeleteOrder) -> bytes:
    """주문 취소 접수 - 주문 uuid(또는 identifier)로 해당 주문 취소"""
    q = convert_struct_to_map(query)
    token = get_jwt_token_with_query(access_key, secret_key, q)
    return request_to_server(url("/v1/order"), "DELETE", token, q)

def post_order(access_key: str, secret_key: str, query: ReqOrders) -> bytes:
    """
    역할: 주문하기
    input: ReqOrders (ord_type별 필수값 검증은 모델 생성 시점에 끝남)
    output: 업비트 응답 body 바이트 (에러 응답도 그대로)
    주의: 실제 주문이 들어감. 업비트는 테스트넷이 없음
    """
    q = convert_struct_to_map(query)
    token = get_jwt_token_with_query(access_key, secret_key, q)
    return request_to_server(url("/v1/orders"), "POST", token, q)
