import pytest
import requests

from movie_reviews.api import ReviewsApi
from movie_reviews.form import ReviewSubmissionForm
from movie_reviews.loader import ReviewListLoader
from movie_reviews.models import AppState

BASE_URL = "http://backend.test"
REVIEWS_URL = f"{BASE_URL}/api/reviews"


@pytest.fixture
def api():
    return ReviewsApi(BASE_URL, session=requests.Session(), timeout=None)


@pytest.fixture
def state():
    return AppState()


@pytest.fixture
def loader(state, api):
    return ReviewListLoader(state, api)


@pytest.fixture
def form(state, api, loader):
    return ReviewSubmissionForm(state, api, loader)


@pytest.fixture
def sample_reviews():
    return [
        {
            "id": 1,
            "title": "Inception",
            "rating": 9,
            "review": "Dreams within dreams.",
            "watched_on": "2024-03-05",
            "poster_url": "https://img.test/inception.jpg",
            "tags": ["sci-fi", "classic"],
        },
        {
            "id": "b2",
            "title": "Cats",
            "rating": 2.5,
            "review": "Why.",
            "watched_on": None,
            "poster_url": None,
            "tags": None,
        },
    ]
