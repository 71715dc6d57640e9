import logging

import streamlit as st

from movie_reviews import config
from movie_reviews.form import ReviewSubmissionForm
from movie_reviews.loader import ReviewListLoader
from movie_reviews.models import DEFAULT_RATING, AppState, FormState
from movie_reviews.views import get_api, render_review_list

# =============================================================================
# 프로젝트: 나의 영화 리뷰 (Streamlit 프론트엔드)
# 개요:
#  - 백엔드(BACKEND_URL)의 /api/reviews 와 통신: 목록 조회(GET) + 리뷰 등록(POST)
#  - 화면 상태는 세션마다 AppState 하나 (로더/폼이 같은 객체를 공유)
#  - 실행: streamlit run movie_reviews/frontend.py
# =============================================================================

config.setup_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title="My Movie Reviews", layout="wide")


API = get_api()

# 세션 상태: 처음 열었을 때 한 번 생성하고 바로 목록 로드
if "app_state" not in st.session_state:
    st.session_state.app_state = AppState()
    with st.spinner("Loading..."):
        ReviewListLoader(st.session_state.app_state, API).load()

state: AppState = st.session_state.app_state
loader = ReviewListLoader(state, API)
form = ReviewSubmissionForm(state, API, loader)


# -----------------------------
# 헤더
# -----------------------------
h1, h2 = st.columns([6, 1])
with h1:
    st.title("My Movie Reviews")
with h2:
    st.markdown("[Check Backend](/test)")

colL, colR = st.columns([2, 3], gap="large")

# -----------------------------
# 리뷰 작성 폼
# -----------------------------
with colL:
    st.subheader("Add a Review")
    # 위젯 키에 revision을 붙여서, 저장 성공 후에는 새 위젯(기본값)으로 교체
    rev = state.form_revision
    with st.form("review_form", clear_on_submit=False):
        title = st.text_input("Title", value="", placeholder="Movie title", key=f"title_{rev}")
        c1, c2 = st.columns(2)
        with c1:
            rating = st.number_input(
                "Rating (0-10)", min_value=0, max_value=10, value=DEFAULT_RATING, step=1, key=f"rating_{rev}"
            )
        with c2:
            watched_on = st.date_input("Watched on", value=None, format="YYYY-MM-DD", key=f"watched_on_{rev}")
        poster_url = st.text_input("Poster URL", value="", placeholder="https://...", key=f"poster_url_{rev}")
        tags = st.text_input(
            "Tags (comma separated)", value="", placeholder="action, sci-fi, classic", key=f"tags_{rev}"
        )
        review = st.text_area(
            "Your Review", value="", height=140, placeholder="Share your thoughts...", key=f"review_{rev}"
        )

        if state.error:
            st.error(state.error)
        if state.success:
            st.success(state.success)

        submitted = st.form_submit_button(
            "Saving..." if state.submitting else "Save Review",
            disabled=state.submitting,
        )

    if submitted:
        form.submit(
            FormState(
                title=title,
                rating=rating if rating is not None else "",
                review=review,
                watched_on=watched_on.isoformat() if watched_on else "",
                poster_url=poster_url,
                tags=tags,
            )
        )
        st.rerun()

# -----------------------------
# 리뷰 목록
# -----------------------------
with colR:
    st.subheader("Your Reviews")
    render_review_list(state.reviews, state.loading)

st.divider()
st.caption("Built for you. All data is stored privately in your project database.")
