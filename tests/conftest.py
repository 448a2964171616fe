import json
from unittest import mock

import jwt
import pytest

from autotrading.exchange import core

@pytest.fixture(autouse=True)
def _base_url(monkeypatch):
    monkeypatch.setattr(core, "BASE_URL", "https://upbit.test")
    monkeypatch.setattr(core, "TIMEOUT", 3)
    monkeypatch.setattr(core, "VERBOSE", False)

@pytest.fixture
def keys():
    """(access_key, secret_key) 테스트용 키 쌍"""
    return "test-access", "test-secret-key-for-hs256-at-least-32b"

@pytest.fixture
def decode(keys):
    return lambda token: jwt.decode(token, keys[1], algorithms=["HS256"])

@pytest.fixture
def http():
    """requests.request 를 가짜 응답으로 대체. 호출 인자는 http.call_args 로 확인"""
    resp = mock.Mock(ok=True, status_code=200, content=b'[{"ok":1}]')
    with mock.patch("autotrading.exchange.core.requests.request", return_value=resp) as m:
        yield m

@pytest.fixture
def candles_raw():
    # 업비트는 최신 캔들이 먼저 온다
    return json.dumps([
        {"market": "KRW-BTC", "candle_date_time_utc": "2024-01-01T00:05:00",
         "candle_date_time_kst": "2024-01-01T09:05:00", "opening_price": 101.0,
         "high_price": 105.0, "low_price": 100.0, "trade_price": 104.0,
         "timestamp": 1704067799000, "candle_acc_trade_price": 1000.0,
         "candle_acc_trade_volume": 2.5, "unit": 5},
        {"market": "KRW-BTC", "candle_date_time_utc": "2024-01-01T00:00:00",
         "candle_date_time_kst": "2024-01-01T09:00:00", "opening_price": 100.0,
         "high_price": 102.0, "low_price": 99.0, "trade_price": 101.0,
         "timestamp": 1704067499000, "candle_acc_trade_price": 900.0,
         "candle_acc_trade_volume": 1.5, "unit": 5},
    ]).encode()
