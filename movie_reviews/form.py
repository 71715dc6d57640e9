import logging
import math

from movie_reviews.api import ReviewsApi
from movie_reviews.errors import ReviewClientError, ValidationError
from movie_reviews.loader import ReviewListLoader
from movie_reviews.models import AppState, FormState, ReviewPayload

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please provide at least a title and your review."
RATING_RANGE_MESSAGE = "Rating must be between 0 and 10"
SAVED_MESSAGE = "Saved!"


# -----------------------------
# 정규화 / 검증
# -----------------------------
def to_number(raw) -> float:
    """
    입력값 → 숫자.
    - 숫자는 그대로 float
    - 문자열은 앞뒤 공백 무시, 빈 문자열은 0, 숫자가 아니면 NaN
    """
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        return float(raw)
    if raw is None:
        return 0.0
    text = str(raw).strip()
    if not text:
        return 0.0
    if "_" in text:  # float()는 "1_0"을 받지만 Number()는 NaN
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_tags(raw: str | None) -> list[str] | None:
    """
    콤마 구분 태그 문자열 → 리스트.
    - 빈 입력은 None
    - ",,," 처럼 내용이 없는 입력은 None이 아니라 [] (기존 동작 유지)
    """
    if not raw:
        return None
    return [t.strip() for t in raw.split(",") if t.strip()]


def normalize_form(form: FormState) -> ReviewPayload:
    return ReviewPayload(
        title=form.title.strip(),
        review=form.review.strip(),
        rating=to_number(form.rating),
        watched_on=form.watched_on or None,
        poster_url=form.poster_url or None,
        tags=parse_tags(form.tags),
    )


def validate_payload(payload: ReviewPayload) -> None:
    """필수값(제목/리뷰) 먼저, 그다음 별점 범위(0~10, NaN 불가)."""
    if not payload.title or not payload.review:
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if math.isnan(payload.rating) or payload.rating < 0 or payload.rating > 10:
        raise ValidationError(RATING_RANGE_MESSAGE)


# -----------------------------
# 제출 폼
# -----------------------------
class ReviewSubmissionForm:
    """
    리뷰 작성 폼.
    - submit(): 정규화 → 검증 → POST → 성공 시 폼 초기화 + 목록 재조회
    - 어떤 경로로 끝나든 submitting 플래그는 False로 돌아온다
    """

    def __init__(self, state: AppState, api: ReviewsApi, loader: ReviewListLoader):
        self.state = state
        self.api = api
        self.loader = loader

    def submit(self, form: FormState | None = None) -> None:
        state = self.state
        if form is not None:
            state.form = form
        state.error = ""
        state.success = ""
        state.submitting = True
        try:
            try:
                payload = normalize_form(state.form)
                validate_payload(payload)
                self.api.create_review(payload)
            except ReviewClientError as e:
                logger.info("Review not saved: %s", e.message)
                state.error = e.message
                return

            logger.info("Saved review %r", payload.title)
            state.success = SAVED_MESSAGE
            state.reset_form()
            self.loader.load()
        finally:
            state.submitting = False
