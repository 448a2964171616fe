# autotrading/exchange/models.py
"""
요청 구조체(파이썬 필드 ↔ 업비트 쿼리 파라미터)
- 필드명이 업비트 파라미터명과 다르면 alias로 매핑 (e.g. uuids → uuids[])
- 값이 None인 필드는 쿼리에서 빠짐 (core.convert_struct_to_map)
- 잘못된 조합은 생성 시점에 pydantic ValidationError
"""

from __future__ import annotations
from decimal import Decimal
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_CANDLE_COUNT = 200  # 업비트 캔들 조회 최대 개수

class ReqBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

# -------------------- 주문 관련 --------------------
class ReqChance(ReqBase):
    market: str

class _ReqOrderKey(ReqBase):
    uuid: Optional[str] = None
    identifier: Optional[str] = None

    @model_validator(mode="after")
    def check_key(self):
        if not self.uuid and not self.identifier:
            raise ValueError("uuid 또는 identifier 중 하나는 필요")
        return self

class ReqOrderSearch(_ReqOrderKey):
    pass

class ReqDeleteOrder(_ReqOrderKey):
    pass

class ReqOrdersSearch(ReqBase):
    market: Optional[str] = None
    uuids: Optional[List[str]] = Field(default=None, alias="uuids[]")
    identifiers: Optional[List[str]] = Field(default=None, alias="identifiers[]")
    state: Optional[str] = None
    states: Optional[List[str]] = Field(default=None, alias="states[]")
    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1, le=100)
    order_by: Optional[Literal["asc", "desc"]] = None

class ReqOrders(ReqBase):
    """
    역할: 주문하기(POST /v1/orders) 파라미터
    - ord_type="limit": volume, price 필요 (지정가)
    - ord_type="price": price 필요, side="bid" (시장가 매수, 총액 지정)
    - ord_type="market": volume 필요, side="ask" (시장가 매도)
    """
    market: str
    side: Literal["bid", "ask"]
    volume: Optional[Decimal] = Field(default=None, gt=0)
    price: Optional[Decimal] = Field(default=None, gt=0)
    ord_type: Literal["limit", "price", "market"]
    identifier: Optional[str] = None

    @model_validator(mode="after")
    def check_ord_type(self):
        t = self.ord_type
        if t == "limit" and (self.volume is None or self.price is None):
            raise ValueError("limit: volume, price 필요")
        if t == "price":
            if self.side != "bid":
                raise ValueError("price(시장가 매수): side는 bid")
            if self.price is None:
                raise ValueError("price(시장가 매수): price 필요")
        if t == "market":
            if self.side != "ask":
                raise ValueError("market(시장가 매도): side는 ask")
            if self.volume is None:
                raise ValueError("market(시장가 매도): volume 필요")
        return self

# -------------------- 캔들 --------------------
class _ReqCandles(ReqBase):
    market: str
    to: Optional[str] = None     # 마지막 캔들 시각(exclusive), ISO8601
    count: Optional[int] = Field(default=None, ge=1, le=MAX_CANDLE_COUNT)

class ReqMinuteCandles(_ReqCandles):
    pass

class ReqDayCandles(_ReqCandles):
    convertingPriceUnit: Optional[str] = None  # 종가 환산 화폐 단위 (e.g. KRW)

class ReqWeekCandles(_ReqCandles):
    pass

class ReqMonthCandles(_ReqCandles):
    pass
