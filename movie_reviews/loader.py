import logging

from movie_reviews.api import ReviewsApi
from movie_reviews.errors import ReviewClientError
from movie_reviews.models import AppState

logger = logging.getLogger(__name__)


class ReviewListLoader:
    """
    리뷰 목록 로더.
    - load()마다 목록 전체를 교체 (병합/중복 제거 없음)
    - 실패하면 기존 목록은 그대로 두고 state.error에 메시지만 남김
    - 중복 호출 방지 장치는 없음: 마지막으로 끝난 응답이 이긴다
    """

    def __init__(self, state: AppState, api: ReviewsApi):
        self.state = state
        self.api = api

    def load(self) -> None:
        self.state.loading = True
        try:
            reviews = self.api.list_reviews()
        except ReviewClientError as e:
            self.state.error = e.message
        else:
            self.state.reviews = reviews
            logger.info("Loaded %d reviews", len(reviews))
        finally:
            self.state.loading = False
