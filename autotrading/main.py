"""
스모크 실행:
- config/base.yaml 의 exchange 설정을 core 에 반영
- 마켓 코드 / 설정된 마켓별 캔들을 받아 DataFrame으로 출력
- .env 에 access/secret key 가 모두 있으면 계좌 조회 결과(raw)도 출력, 없으면 생략

사용: python -m autotrading.main --config config/base.yaml
"""

import argparse
import json

from config.config_loader import load_config
from config.settings import get_api_config, verify_api_keys
from autotrading.exchange import (
    configure, get_account, get_market_code, get_minute_candles,
    get_day_candles, get_week_candles, get_months_candles, candles_to_frame,
)
from autotrading.exchange.models import (
    ReqMinuteCandles, ReqDayCandles, ReqWeekCandles, ReqMonthCandles,
)

_CANDLES = {
    "days":   (ReqDayCandles, get_day_candles),
    "weeks":  (ReqWeekCandles, get_week_candles),
    "months": (ReqMonthCandles, get_months_candles),
}

def fetch_candles(spec) -> bytes:
    if spec.candle == "minutes":
        return get_minute_candles(ReqMinuteCandles(market=spec.market, count=spec.count), spec.unit)
    if spec.candle not in _CANDLES:
        raise ValueError(f"unsupported candle: {spec.candle}")
    model, fn = _CANDLES[spec.candle]
    return fn(model(market=spec.market, count=spec.count))

def main(argv=None):
    ap = argparse.ArgumentParser(description="upbit REST smoke run")
    ap.add_argument("--config", default="config/base.yaml")
    args = ap.parse_args(argv)

    cfg = load_config(args.config)
    configure(base_url=cfg.exchange.base_url, timeout=cfg.exchange.timeout,
              verbose=cfg.exchange.verbose)

    markets = json.loads(get_market_code())
    print(f"[info] markets: {len(markets)}")

    for spec in cfg.markets:
        df = candles_to_frame(fetch_candles(spec))
        print(f"[info] {spec.market} {spec.candle}: rows={len(df)}")
        print(df.tail(5))

    api = get_api_config()
    if not (api["ACCESS_KEY"] and api["SECRET_KEY"]):
        print("[info] access/secret key 없음 -> 계좌 조회 생략")
        return
    access_key, secret_key = verify_api_keys(api)
    print(get_account(access_key, secret_key).decode("utf-8"))

if __name__ == "__main__":
    main()
