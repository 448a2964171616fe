"""
실행 설정(YAML) 로더
- 역할: base.yaml + overlay(dev.yaml 등)를 읽어 ${VAR:-default} 치환 후 병합, RootConfig로 검증
- input: base_path, overlays(뒤에 올수록 우선)
- output: RootConfig (exchange: 접속 설정, markets: 스모크 실행 대상)
- 연결: autotrading.main 이 exchange 값을 core.configure() 에 넘김
"""

from __future__ import annotations
import os, pathlib, re
from typing import Any, Dict, List, Optional
from ruamel.yaml import YAML
from pydantic import BaseModel, ConfigDict, Field

yaml = YAML(typ="safe")

# ENV 치환 ${VAR:-default}
_env_re = re.compile(r"\$\{([A-Z0-9_]+)(:-([^}]*))?\}")
def _env_expand(v: Any) -> Any:
    if isinstance(v, str):
        def repl(m):
            var, _, default = m.groups()
            return os.getenv(var, default or "")
        return _env_re.sub(repl, v)
    if isinstance(v, dict):
        return {k: _env_expand(x) for k, x in v.items()}
    if isinstance(v, list):
        return [_env_expand(x) for x in v]
    return v

def _load_yaml(path: pathlib.Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.load(f) or {}
    return _env_expand(data)

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in b.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

# ---- 스키마 ----
class ExchangeSpec(BaseModel):
    base_url: str = "https://api.upbit.com"
    timeout: float = 10.0
    verbose: bool = True

class MarketSpec(BaseModel):
    market: str                  # e.g. KRW-BTC
    candle: str = "minutes"      # minutes | days | weeks | months
    unit: int = 1                # minutes 캔들일 때만 사용
    count: int = Field(default=50, ge=1, le=200)

class RootConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: int
    project: str
    exchange: ExchangeSpec = ExchangeSpec()
    markets: List[MarketSpec] = Field(default_factory=list)

def load_config(base_path: str, overlays: Optional[List[str]] = None) -> RootConfig:
    merged = _load_yaml(pathlib.Path(base_path))
    for ov in (overlays or []):
        merged = _deep_merge(merged, _load_yaml(pathlib.Path(ov)))
    return RootConfig(**merged)
