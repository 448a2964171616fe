# config/settings.py

import os
from dotenv import load_dotenv

load_dotenv()

# 업비트 REST 서버 주소 (기본: 운영 서버)
UPBIT_BASE_URL = os.getenv("UPBIT_BASE_URL", "https://api.upbit.com")

# API KEY들: 보안조치를 신경써서 .env에 저장.
UPBIT_API_KEYS = {
    "ACCESS_KEY": os.getenv("UPBIT_ACCESS_KEY"),
    "SECRET_KEY": os.getenv("UPBIT_SECRET_KEY"),
}

UPBIT_TIMEOUT = float(os.getenv("UPBIT_TIMEOUT", "10"))  # seconds

# 요청 쿼리스트링 출력 여부
UPBIT_VERBOSE = os.getenv("UPBIT_VERBOSE", "true").lower() == "true"

# 설정값을 dict로 반환하는 코드
def get_api_config():
    return {
        "BASE_URL": UPBIT_BASE_URL.rstrip("/"),
        "ACCESS_KEY": UPBIT_API_KEYS["ACCESS_KEY"],
        "SECRET_KEY": UPBIT_API_KEYS["SECRET_KEY"],
        "TIMEOUT": UPBIT_TIMEOUT,
        "VERBOSE": UPBIT_VERBOSE,
    }

def verify_api_keys(cfg=None):
    cfg = cfg or get_api_config()
    if not cfg["ACCESS_KEY"]:
        raise ValueError("upbit access key 환경변수가 제대로 설정되지 않았습니다.")
    elif not cfg["SECRET_KEY"]:
        raise ValueError("upbit secret key 환경변수가 제대로 설정되지 않았습니다.")
    return cfg["ACCESS_KEY"], cfg["SECRET_KEY"]
