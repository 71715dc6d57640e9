"""My Movie Reviews: Streamlit client for a personal movie review backend."""

from movie_reviews.api import ReviewsApi
from movie_reviews.form import ReviewSubmissionForm
from movie_reviews.loader import ReviewListLoader
from movie_reviews.models import AppState, FormState, Review, ReviewPayload

__all__ = [
    "AppState",
    "FormState",
    "Review",
    "ReviewPayload",
    "ReviewsApi",
    "ReviewListLoader",
    "ReviewSubmissionForm",
]
