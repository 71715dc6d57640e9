import os
import logging
from dotenv import load_dotenv

# =============================================================================
# 설정: 환경 변수(.env 포함) → 모듈 상수
#  - BACKEND_URL               : 백엔드 주소 (기본 http://localhost:8000)
#  - MOVIE_REVIEWS_TIMEOUT     : 요청 타임아웃(초). 미설정이면 타임아웃 없음
#  - MOVIE_REVIEWS_MAX_RETRIES : GET 재시도 횟수 (기본 0 = 재시도 안 함)
#  - MOVIE_REVIEWS_LOG_LEVEL   : 로그 레벨 (기본 INFO)
# =============================================================================

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://localhost:8000"


def _env_float(name: str, default: float | None) -> float | None:
    """숫자 환경 변수 파싱. 비어 있거나 잘못된 값이면 기본값으로 폴백."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("%s=%r is not a number, using %r", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s must be positive, using %r", name, default)
        return default
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %r", name, raw, default)
        return default
    return max(value, 0)


BACKEND_URL = (os.getenv("BACKEND_URL") or DEFAULT_BACKEND_URL).rstrip("/")
TIMEOUT_S = _env_float("MOVIE_REVIEWS_TIMEOUT", None)  # None → requests 기본(무제한 대기)
MAX_RETRIES = _env_int("MOVIE_REVIEWS_MAX_RETRIES", 0)
LOG_LEVEL = os.getenv("MOVIE_REVIEWS_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str | None = None) -> None:
    """루트 로거 설정 (Streamlit 재실행마다 호출돼도 basicConfig는 한 번만 적용)."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
