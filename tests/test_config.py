from pathlib import Path

import pytest
from pydantic import ValidationError

from config.config_loader import load_config
from config.settings import get_api_config, verify_api_keys


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_load_config_env_expand_and_overlay(tmp_path, monkeypatch):
    monkeypatch.setenv("UPBIT_BASE_URL", "https://env.test")
    base = _write(tmp_path / "base.yaml", """
version: 1
project: autotrading
exchange:
  base_url: ${UPBIT_BASE_URL:-https://api.upbit.com}
  timeout: 5
markets:
  - market: KRW-BTC
    unit: 5
""")
    ov = _write(tmp_path / "dev.yaml", """
exchange:
  verbose: false
""")
    cfg = load_config(base, [ov])
    assert cfg.exchange.base_url == "https://env.test"
    assert cfg.exchange.timeout == 5
    assert cfg.exchange.verbose is False
    assert cfg.markets[0].candle == "minutes"
    assert cfg.markets[0].count == 50


def test_env_default_used_when_unset(tmp_path, monkeypatch):
    monkeypatch.delenv("UPBIT_BASE_URL", raising=False)
    base = _write(tmp_path / "base.yaml", """
version: 1
project: p
exchange:
  base_url: ${UPBIT_BASE_URL:-https://api.upbit.com}
""")
    assert load_config(base).exchange.base_url == "https://api.upbit.com"


def test_root_extra_key_forbidden(tmp_path):
    base = _write(tmp_path / "base.yaml", "version: 1\nproject: p\nunknown: 1\n")
    with pytest.raises(ValidationError):
        load_config(base)


def test_shipped_base_yaml_loads():
    cfg = load_config(str(Path(__file__).resolve().parents[1] / "config" / "base.yaml"))
    assert [m.market for m in cfg.markets] == ["KRW-BTC", "KRW-ETH"]


def test_verify_api_keys():
    cfg = get_api_config()
    cfg.update(ACCESS_KEY="a", SECRET_KEY="s")
    assert verify_api_keys(cfg) == ("a", "s")
    with pytest.raises(ValueError):
        verify_api_keys({**cfg, "SECRET_KEY": None})
    with pytest.raises(ValueError):
        verify_api_keys({**cfg, "ACCESS_KEY": ""})
