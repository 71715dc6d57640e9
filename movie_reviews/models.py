from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter

# ================================== 스키마 정의 ==================================
# 서버 소유 데이터(Review)는 pydantic, 클라이언트 전용 임시 상태는 dataclass


class Review(BaseModel):
    """백엔드가 저장/반환하는 리뷰 한 건 (id는 서버가 부여)"""
    model_config = ConfigDict(extra="ignore")

    id         : Any            # 서버가 주는 값 그대로 (타입 가정 없음)
    title      : str
    rating     : float
    review     : str
    watched_on : Optional[str] = None   # ISO 날짜 문자열 (표시할 때 파싱)
    poster_url : Optional[str] = None
    tags       : Optional[List[str]] = None


class ReviewPayload(BaseModel):
    """POST /api/reviews 요청 본문 (정규화 완료된 값)"""
    title      : str
    review     : str
    rating     : float
    watched_on : Optional[str] = None
    poster_url : Optional[str] = None
    tags       : Optional[List[str]] = None

    def to_json(self) -> dict:
        """전송용 dict. 정수 별점은 7.0이 아니라 7로 보낸다."""
        body = self.model_dump()
        if self.rating == self.rating and float(self.rating).is_integer():  # NaN 제외
            body["rating"] = int(self.rating)
        return body


REVIEW_LIST = TypeAdapter(List[Review])


DEFAULT_RATING = 7


@dataclass
class FormState:
    """
    입력 폼의 원시 값 (정규화 전).
    - rating은 숫자 입력 위젯 값 또는 텍스트가 그대로 들어올 수 있음
    - 저장 성공 시 기본값으로 초기화
    """
    title: str = ""
    rating: Union[int, float, str] = DEFAULT_RATING
    review: str = ""
    watched_on: str = ""
    poster_url: str = ""
    tags: str = ""


@dataclass
class AppState:
    """
    화면 전체가 공유하는 상태 컨테이너 (컴포지션 루트가 소유).
    - 로더: reviews / loading / error
    - 폼  : form / submitting / error / success
    """
    reviews: List[Review] = field(default_factory=list)
    loading: bool = True
    error: str = ""
    success: str = ""
    submitting: bool = False
    form: FormState = field(default_factory=FormState)
    form_revision: int = 0  # 폼 초기화 때마다 증가 → 위젯 키 교체용

    def reset_form(self) -> None:
        self.form = FormState()
        self.form_revision += 1
