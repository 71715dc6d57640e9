import math
from datetime import date, datetime

import streamlit as st

from movie_reviews import config
from movie_reviews.api import ReviewsApi, get_session
from movie_reviews.models import Review

IMAGE_PREFIXES = ("http://", "https://", "data:")


# -----------------------------
# 공용 API 클라이언트 (프로세스 전역, 모든 페이지가 공유)
# -----------------------------
@st.cache_resource
def get_api() -> ReviewsApi:
    return ReviewsApi(config.BACKEND_URL, session=get_session(), timeout=config.TIMEOUT_S)


# -----------------------------
# 표시용 유틸
# -----------------------------
def clamp_rating(value) -> float:
    """별점을 0~10으로 잘라서 표시 (숫자가 아니면 0)."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(v):
        return 0.0
    return max(0.0, min(10.0, v))


def format_rating(value) -> str:
    """'8/ 10' 형태. 정수 별점은 소수점 없이."""
    v = clamp_rating(value)
    shown = int(v) if v.is_integer() else round(v, 1)
    return f"{shown}/ 10"


def poster_src(value: str | None) -> str | None:
    """
    st.image에 넘길 수 있는 포스터 주소만 통과.
    - URL이 아닌 문자열은 st.image가 로컬 파일로 열려다 예외를 내므로 None
    """
    if not value:
        return None
    url = value.strip()
    return url if url.lower().startswith(IMAGE_PREFIXES) else None


def format_watched_on(value: str | None) -> str | None:
    """ISO 날짜(또는 날짜시간) → 'Mar 5, 2024'. 해석 못 하면 원문 그대로."""
    if not value:
        return None
    try:
        d = date.fromisoformat(value[:10])
    except ValueError:
        try:
            d = datetime.fromisoformat(value).date()
        except ValueError:
            return value
    return f"{d:%b} {d.day}, {d.year}"


# -----------------------------
# 렌더링 함수
# -----------------------------
def render_star_rating(value) -> None:
    st.markdown(f"**:orange[{format_rating(value)}]**")


def render_review_card(rv: Review) -> None:
    """
    리뷰 카드 한 장.
    - 포스터는 있을 때만, 날짜/태그도 값이 있을 때만 표시
    """
    with st.container(border=True):
        src = poster_src(rv.poster_url)
        if src:
            c_img, c_body = st.columns([1, 4])
            with c_img:
                st.image(src)
        else:
            c_body = st.container()

        with c_body:
            h1, h2 = st.columns([4, 1])
            with h1:
                st.markdown(f"#### {rv.title}")
            with h2:
                render_star_rating(rv.rating)

            watched = format_watched_on(rv.watched_on)
            if watched:
                st.caption(f"Watched on {watched}")

            st.write(rv.review)

            if rv.tags:
                st.caption(" ".join(f"`#{t}`" for t in rv.tags))


def render_review_list(reviews: list[Review], loading: bool) -> None:
    """목록 영역: 로딩 중 → 'Loading...', 비었으면 안내 문구, 아니면 카드 나열."""
    if loading:
        st.write("Loading...")
    elif not reviews:
        st.info("No reviews yet. Add your first one!")
    else:
        for rv in reviews:
            render_review_card(rv)
