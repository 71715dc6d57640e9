import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from pydantic import ValidationError as PydanticValidationError

from movie_reviews import config
from movie_reviews.errors import NetworkError, ParseError, ServerError
from movie_reviews.models import REVIEW_LIST, Review, ReviewPayload

# =============================================================================
# 백엔드 API 래퍼
#  - GET  /api/reviews : 전체 리뷰 목록
#  - POST /api/reviews : 리뷰 등록 (응답 본문은 쓰지 않고 목록을 다시 조회)
#  - 실패는 전부 ReviewClientError 하위 예외로 변환해서 올린다
# =============================================================================

logger = logging.getLogger(__name__)

REVIEWS_PATH = "/api/reviews"
SAVE_FAILED_MESSAGE = "Failed to save review"


# -----------------------------
# 공통 HTTP 세션
# -----------------------------
def get_session(max_retries: int = config.MAX_RETRIES) -> requests.Session:
    """
    연결 재사용용 공용 세션.
    - 기본은 재시도 없음(max_retries=0): 실패는 곧바로 사용자에게 보여준다
    - 재시도를 켜도 GET에만 적용 (POST 재시도는 중복 저장 위험)
    """
    s = requests.Session()
    retries = Retry(
        total=max_retries,
        backoff_factor=0.3,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    s.mount("http://", HTTPAdapter(max_retries=retries))
    s.mount("https://", HTTPAdapter(max_retries=retries))
    return s


def _detail_from(resp: requests.Response) -> str | None:
    """에러 응답 본문의 detail 필드. 파싱 실패는 '없음'으로 취급."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    detail = body.get("detail")
    if not detail:
        return None
    return detail if isinstance(detail, str) else str(detail)


class ReviewsApi:
    """리뷰 백엔드 클라이언트 (세션/타임아웃은 주입 가능)"""

    def __init__(
        self,
        base_url: str = config.BACKEND_URL,
        session: requests.Session | None = None,
        timeout: float | None = config.TIMEOUT_S,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or get_session()
        self.timeout = timeout

    @property
    def reviews_url(self) -> str:
        return f"{self.base_url}{REVIEWS_PATH}"

    def list_reviews(self) -> list[Review]:
        """
        리뷰 전체 조회.
        - 2xx가 아니면 ServerError("Failed: <status>") (본문은 무시)
        - JSON 디코딩/형태 오류는 ParseError, 전송 오류는 NetworkError
        """
        logger.debug("GET %s", self.reviews_url)
        try:
            r = self.session.get(self.reviews_url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Review list request failed: %s", e)
            raise NetworkError(str(e)) from e

        if not r.ok:
            logger.warning("Review list request returned HTTP %s", r.status_code)
            raise ServerError(f"Failed: {r.status_code}", r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise ParseError(str(e)) from e
        if not isinstance(data, list):
            raise ParseError(f"Expected a list of reviews, got {type(data).__name__}")
        try:
            return REVIEW_LIST.validate_python(data)
        except PydanticValidationError as e:
            logger.warning("Review list has invalid items: %s", e)
            raise ParseError(f"Unexpected review data from server ({e.error_count()} invalid fields)") from e

    def create_review(self, payload: ReviewPayload) -> None:
        """
        리뷰 등록. 성공 응답 본문은 쓰지 않는다(호출측이 목록을 다시 읽음).
        - 실패 시 본문의 detail을 메시지로, 없으면 "Failed to save review"
        """
        logger.debug("POST %s title=%r", self.reviews_url, payload.title)
        try:
            r = self.session.post(self.reviews_url, json=payload.to_json(), timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Create review request failed: %s", e)
            raise NetworkError(str(e)) from e

        if not r.ok:
            message = _detail_from(r) or SAVE_FAILED_MESSAGE
            logger.warning("Create review returned HTTP %s: %s", r.status_code, message)
            raise ServerError(message, r.status_code)

    def check_backend(self) -> tuple[int, object]:
        """
        진단 페이지(/test)용: 백엔드 루트(GET /) 응답 상태와 본문.
        - JSON이 아니면 텍스트 그대로 반환
        """
        url = f"{self.base_url}/"
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e
        try:
            body = r.json()
        except ValueError:
            body = r.text
        return r.status_code, body
