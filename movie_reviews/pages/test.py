import streamlit as st

from movie_reviews import config
from movie_reviews.views import get_api
from movie_reviews.errors import ReviewClientError

# 백엔드 연결 확인용 진단 페이지 (/test)

st.title("Backend Check")
st.caption(f"BACKEND_URL = `{config.BACKEND_URL}`")

if st.button("Check again"):
    st.rerun()

try:
    with st.spinner("Contacting backend..."):
        status_code, body = get_api().check_backend()
except ReviewClientError as e:
    st.error(f"Backend unreachable: {e.message}")
else:
    if 200 <= status_code < 300:
        st.success(f"Backend responded with HTTP {status_code}")
    else:
        st.warning(f"Backend responded with HTTP {status_code}")
    if isinstance(body, (dict, list)):
        st.json(body)
    else:
        st.code(str(body) or "(empty body)")

st.markdown("[Back to reviews](/)")
