# autotrading/exchange/core.py
import requests
from decimal import Decimal
from urllib.parse import urlencode
from typing import Dict, Any, List, Optional, Tuple

from pydantic import BaseModel

from config.settings import get_api_config

_cfg = get_api_config()
BASE_URL = _cfg["BASE_URL"]
TIMEOUT = _cfg["TIMEOUT"]
VERBOSE = _cfg["VERBOSE"]

class UpbitRequestError(RuntimeError):
    """요청 자체가 실패(연결/타임아웃 등). 업비트 에러 응답(4xx/5xx)은 바이트로 그대로 반환됨"""

# -------------------- 설정 --------------------
def configure(base_url: Optional[str] = None, timeout: Optional[float] = None,
              verbose: Optional[bool] = None) -> None:
    """YAML 설정(config_loader.ExchangeSpec) 등으로 모듈 설정을 덮어씀"""
    global BASE_URL, TIMEOUT, VERBOSE
    if base_url is not None: BASE_URL = base_url.rstrip("/")
    if timeout is not None: TIMEOUT = timeout
    if verbose is not None: VERBOSE = verbose

def url(path: str) -> str:
    return f"{BASE_URL}{path}"

# -------------------- 내부 유틸 --------------------
def convert_struct_to_map(obj: Any) -> Dict[str, Any]:
    """
    역할: 요청 구조체 → {업비트 파라미터명: 값} dict
    input: models.Req* 인스턴스 / dict / None
    output: None 값이 제거된 dict (필드 선언 순서 유지)
    """
    if obj is None:
        return {}
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True, exclude_none=True)
    if isinstance(obj, dict):
        return {k: v for k, v in obj.items() if v is not None}
    raise TypeError(f"unsupported query type: {type(obj).__name__}")

def _to_str(v: Any) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, Decimal):
        return format(v, "f")
    return str(v)

def build_query(query: Optional[Dict[str, Any]]) -> List[Tuple[str, str]]:
    """
    역할: dict → (key, value) 쌍 리스트
    - 리스트/튜플 값은 원소마다 같은 key로 반복 (states[]=done&states[]=cancel)
    - None 은 생략
    연결:
      - request_to_server*/auth.query_string 이 같은 결과를 사용
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in (query or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for v in value:
                if v is not None:
                    pairs.append((key, _to_str(v)))
        else:
            pairs.append((key, _to_str(value)))
    return pairs

def _dispatch(req_url: str, method: str, headers: Dict[str, str],
              query: Optional[Dict[str, Any]]) -> bytes:
    params = build_query(query)
    if VERBOSE:
        print(f"[query] {method.upper()} {req_url} {urlencode(params)}")
    try:
        r = requests.request(method.upper(), req_url, headers=headers,
                             params=params, timeout=TIMEOUT)
    except requests.RequestException as e:
        raise UpbitRequestError(f"{method.upper()} {req_url} 요청 실패: {e}") from e
    if not r.ok:
        print(f"[warn] {method.upper()} {req_url} -> HTTP {r.status_code}")
    return r.content

# -------------------- 요청 --------------------
def request_to_server(req_url: str, method: str, token: str,
                      query: Optional[Dict[str, Any]] = None) -> bytes:
    """업비트 서버로 요청 (Authorization: Bearer 토큰 포함). 응답 body 바이트를 그대로 반환"""
    return _dispatch(req_url, method, {"Authorization": f"Bearer {token}"}, query)

def request_to_server_simple(req_url: str, method: str,
                             query: Optional[Dict[str, Any]] = None) -> bytes:
    """토큰 미포함 요청 (시세 조회 등 공개 API)"""
    return _dispatch(req_url, method, {}, query)
