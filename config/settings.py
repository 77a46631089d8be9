# config/settings.py
import os
import math
import logging
from dotenv import load_dotenv, find_dotenv

env_path = find_dotenv(raise_error_if_not_found=False, usecwd=False)

if env_path and os.path.exists(env_path):
    load_dotenv(dotenv_path=env_path)
    logging.info(f".env 로드 성공: {env_path}")
else:
    logging.debug(".env 파일 없음. 기본값 사용")

# 검색 엔진 주소
BING_SEARCH_URL = os.getenv("BING_SEARCH_URL", "http://www.bing.com/search")
GOOGLE_SEARCH_URL = os.getenv(
    "GOOGLE_SEARCH_URL", "http://ajax.googleapis.com/ajax/services/search/web?v=1.0"
)

# HTTP 요청 설정
DEFAULT_HTTP_TIMEOUT = 10.0
USER_AGENT = os.getenv("USER_AGENT")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def parse_timeout(raw, default: float = DEFAULT_HTTP_TIMEOUT) -> float:
    """양의 유한한 초 단위 값만 허용 (nan, inf, 0 이하, 숫자 아님 -> 기본값)"""
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logging.error(f"HTTP_TIMEOUT 값 오류 '{raw}'. 기본값 {default}s 사용")
        return default
    if not math.isfinite(value) or value <= 0:
        logging.error(
            f"HTTP_TIMEOUT 은 0보다 큰 유한한 값이어야 함: {raw}. 기본값 사용"
        )
        return default
    return value


HTTP_TIMEOUT = parse_timeout(os.getenv("HTTP_TIMEOUT"))


def resolve_timeout(timeout=None) -> float:
    """호출 시 넘긴 timeout 검증. None 이면 HTTP_TIMEOUT"""
    if timeout is None:
        return HTTP_TIMEOUT
    return parse_timeout(timeout, default=HTTP_TIMEOUT)


# 설정값 확인
invalid_keys = []
for key, value in (
    ("BING_SEARCH_URL", BING_SEARCH_URL),
    ("GOOGLE_SEARCH_URL", GOOGLE_SEARCH_URL),
):
    if not value.startswith(("http://", "https://")):
        invalid_keys.append(key)

if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
    invalid_keys.append("LOG_LEVEL")

if invalid_keys:
    logging.warning(f"설정 확인 필요: {', '.join(invalid_keys)}")


def default_headers() -> dict:
    """USER_AGENT 가 설정된 경우에만 헤더를 추가"""
    if USER_AGENT:
        return {"User-Agent": USER_AGENT}
    return {}
