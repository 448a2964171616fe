# autotrading/exchange/auth.py
from __future__ import annotations
import hashlib, uuid
from typing import Any, Dict, Optional
from urllib.parse import urlencode, unquote

import jwt

from .core import build_query

QUERY_HASH_ALG = "SHA512"

def _check_keys(access_key: Optional[str], secret_key: Optional[str]) -> None:
    if not access_key or not secret_key:
        raise ValueError("access_key, secret_key 모두 필요")

def query_string(query: Optional[Dict[str, Any]]) -> str:
    """
    역할: query_hash 계산용 쿼리스트링 (URL 인코딩을 풀어낸 형태)
    input: convert_struct_to_map() 결과 dict
    output: "market=KRW-BTC&states[]=done&states[]=cancel" 형태 문자열
    연결:
      - 실제 요청(core.request_to_server)과 같은 build_query()를 거치므로
        서버에 보내는 파라미터 순서/반복과 동일함
    """
    return unquote(urlencode(build_query(query)))

def get_jwt_token(access_key: str, secret_key: str) -> str:
    _check_keys(access_key, secret_key)
    payload = {
        "access_key": access_key,
        "nonce": str(uuid.uuid4()),
    }
    return jwt.encode(payload, secret_key, algorithm="HS256")

def get_jwt_token_with_query(access_key: str, secret_key: str,
                             query: Optional[Dict[str, Any]]) -> str:
    """
    역할: 파라미터가 있는 요청용 토큰. query_hash(SHA512)를 payload에 포함
    파라미터가 비어 있으면 query_hash 없이 get_jwt_token()과 동일
    """
    qs = query_string(query)
    if not qs:
        return get_jwt_token(access_key, secret_key)
    _check_keys(access_key, secret_key)
    payload = {
        "access_key": access_key,
        "nonce": str(uuid.uuid4()),
        "query_hash": hashlib.sha512(qs.encode("utf-8")).hexdigest(),
        "query_hash_alg": QUERY_HASH_ALG,
    }
    return jwt.encode(payload, secret_key, algorithm="HS256")
