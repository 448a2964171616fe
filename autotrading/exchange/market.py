# autotrading/exchange/market.py
import json
import pandas as pd
from typing import Union

from .core import url, convert_struct_to_map, request_to_server_simple
from .models import ReqMinuteCandles, ReqDayCandles, ReqWeekCandles, ReqMonthCandles

MINUTE_UNITS = (1, 3, 5, 10, 15, 30, 60, 240)

def get_market_code() -> bytes:
    """마켓 코드 조회 - 업비트에서 거래 가능한 마켓 목록 (유의 종목 정보 포함)"""
    return request_to_server_simple(url("/v1/market/all"), "GET", {"isDetails": True})

def get_minute_candles(query: ReqMinuteCandles, unit: Union[int, str]) -> bytes:
    if isinstance(unit, bool):
        raise ValueError(f"unsupported minute unit: {unit}")
    try:
        u = int(unit)
    except (TypeError, ValueError):
        raise ValueError(f"unsupported minute unit: {unit}") from None
    if u not in MINUTE_UNITS:
        raise ValueError(f"unsupported minute unit: {unit} (허용: {MINUTE_UNITS})")
    return request_to_server_simple(url(f"/v1/candles/minutes/{u}"), "GET",
                                    convert_struct_to_map(query))

def get_day_candles(query: ReqDayCandles) -> bytes:
    return request_to_server_simple(url("/v1/candles/days"), "GET", convert_struct_to_map(query))

def get_week_candles(query: ReqWeekCandles) -> bytes:
    return request_to_server_simple(url("/v1/candles/weeks"), "GET", convert_struct_to_map(query))

def get_months_candles(query: ReqMonthCandles) -> bytes:
    return request_to_server_simple(url("/v1/candles/months"), "GET", convert_struct_to_map(query))

def candles_to_frame(raw: bytes) -> pd.DataFrame:
    """
    역할: 캔들 응답 body(bytes) → OHLCV DataFrame
    input: get_*_candles() 반환값
    output: open_time(UTC, tz-naive) 오름차순, open/high/low/close/volume float
    주의:
      - 업비트는 최신 캔들이 맨 앞 → 시간순으로 다시 정렬
      - 에러 응답({"error": {...}}) 또는 리스트가 아닌 body면 RuntimeError
    """
    data = json.loads(raw)
    if isinstance(data, dict) and "error" in data:
        err = data["error"] or {}
        raise RuntimeError(f"candle error name={err.get('name')} msg={err.get('message')}")
    if not isinstance(data, list):
        raise RuntimeError(f"unexpected candle body: {str(data)[:200]}")
    cols = ["open_time", "open", "high", "low", "close", "volume"]
    if not data:
        return pd.DataFrame(columns=cols)
    df = pd.DataFrame(data)
    df = df.rename(columns={
        "candle_date_time_utc": "open_time",
        "opening_price": "open",
        "high_price": "high",
        "low_price": "low",
        "trade_price": "close",
        "candle_acc_trade_volume": "volume",
    })
    df["open_time"] = pd.to_datetime(df["open_time"])
    for c in ["open", "high", "low", "close", "volume"]:
        df[c] = df[c].astype(float)
    return df[cols].sort_values("open_time").reset_index(drop=True)
