"""Tests for form normalization, validation and the submit workflow."""

import json
import math

import pytest
import requests
import responses

from movie_reviews.errors import ValidationError
from movie_reviews.form import (
    MISSING_FIELDS_MESSAGE,
    RATING_RANGE_MESSAGE,
    SAVED_MESSAGE,
    normalize_form,
    parse_tags,
    to_number,
    validate_payload,
)
from movie_reviews.models import FormState
from tests.conftest import REVIEWS_URL


# -----------------------------
# 정규화
# -----------------------------
def test_title_and_review_are_trimmed():
    payload = normalize_form(FormState(title="  Inception  ", review="\n Great \t"))
    assert payload.title == "Inception"
    assert payload.review == "Great"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (7, 7.0),
        (7.5, 7.5),
        ("8", 8.0),
        (" 9.5 ", 9.5),
        ("", 0.0),
        ("   ", 0.0),
    ],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected


def test_to_number_unparseable_text_is_nan():
    assert math.isnan(to_number("seven"))


def test_to_number_rejects_digit_separators():
    assert math.isnan(to_number("1_0"))


def test_empty_optional_fields_become_none():
    payload = normalize_form(FormState(title="x", review="y"))
    assert payload.watched_on is None
    assert payload.poster_url is None
    assert payload.tags is None


def test_optional_fields_pass_through_as_is():
    payload = normalize_form(
        FormState(title="x", review="y", watched_on="2024-03-05", poster_url=" https://img.test/p.jpg")
    )
    assert payload.watched_on == "2024-03-05"
    assert payload.poster_url == " https://img.test/p.jpg"


def test_tags_are_split_trimmed_and_filtered():
    assert parse_tags("action, sci-fi ,  , classic") == ["action", "sci-fi", "classic"]


def test_empty_tags_input_is_none():
    assert parse_tags("") is None
    assert parse_tags(None) is None


def test_tags_with_only_separators_is_empty_list():
    assert parse_tags(",,,") == []
    assert parse_tags(" , ") == []


# -----------------------------
# 검증
# -----------------------------
@pytest.mark.parametrize("title, review", [("", "Great"), ("Inception", ""), ("   ", "Great"), ("Inception", "  ")])
def test_missing_title_or_review(title, review):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(normalize_form(FormState(title=title, review=review)))
    assert exc_info.value.message == MISSING_FIELDS_MESSAGE


@pytest.mark.parametrize("rating", [-1, 11, "10.01", "abc", "nan"])
def test_rating_out_of_range(rating):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(normalize_form(FormState(title="t", review="r", rating=rating)))
    assert exc_info.value.message == RATING_RANGE_MESSAGE


@pytest.mark.parametrize("rating", [0, 10, "0", "10", 5.5])
def test_rating_bounds_are_inclusive(rating):
    validate_payload(normalize_form(FormState(title="t", review="r", rating=rating)))


def test_missing_fields_checked_before_rating():
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(normalize_form(FormState(title="", review="", rating=99)))
    assert exc_info.value.message == MISSING_FIELDS_MESSAGE


# -----------------------------
# submit()
# -----------------------------
@responses.activate
def test_validation_failure_never_calls_backend(form, state):
    state.success = "Saved!"

    form.submit(FormState(title="", review="Great"))

    assert len(responses.calls) == 0
    assert state.error == MISSING_FIELDS_MESSAGE
    assert state.success == ""
    assert state.submitting is False
    # 실패 시 입력값은 유지
    assert state.form.review == "Great"


@responses.activate
def test_out_of_range_rating_never_calls_backend(form, state):
    form.submit(FormState(title="Inception", review="Dreams", rating=11))

    assert len(responses.calls) == 0
    assert state.error == RATING_RANGE_MESSAGE
    assert state.submitting is False
    assert state.form_revision == 0


@responses.activate
def test_successful_submit_resets_form_and_reloads(form, state, sample_reviews):
    state.error = "old error"
    responses.add(responses.POST, REVIEWS_URL, json={"id": 1}, status=201)
    responses.add(responses.GET, REVIEWS_URL, json=sample_reviews, status=200)

    form.submit(FormState(title="  Inception  ", review="Dreams", rating="9", tags="sci-fi, classic"))

    assert [c.request.method for c in responses.calls] == ["POST", "GET"]
    sent = json.loads(responses.calls[0].request.body)
    assert sent["title"] == "Inception"
    assert sent["rating"] == 9
    assert sent["tags"] == ["sci-fi", "classic"]

    assert state.success == SAVED_MESSAGE
    assert state.error == ""
    assert state.form == FormState()
    assert state.form.rating == 7
    assert state.form_revision == 1
    assert [r.title for r in state.reviews] == ["Inception", "Cats"]
    assert state.submitting is False
    assert state.loading is False


@responses.activate
def test_server_error_detail_is_surfaced(form, state):
    responses.add(responses.POST, REVIEWS_URL, json={"detail": "Title already exists"}, status=400)

    form.submit(FormState(title="Inception", review="Dreams"))

    assert state.error == "Title already exists"
    assert state.success == ""
    assert state.submitting is False
    assert state.form_revision == 0
    # 목록 재조회 없음
    assert [c.request.method for c in responses.calls] == ["POST"]


@responses.activate
def test_network_error_is_surfaced(form, state):
    responses.add(responses.POST, REVIEWS_URL, body=requests.exceptions.ConnectionError("Connection refused"))

    form.submit(FormState(title="Inception", review="Dreams"))

    assert "Connection refused" in state.error
    assert state.submitting is False


@responses.activate
def test_reload_failure_after_save_keeps_success_message(form, state):
    responses.add(responses.POST, REVIEWS_URL, status=201)
    responses.add(responses.GET, REVIEWS_URL, status=502)

    form.submit(FormState(title="Inception", review="Dreams"))

    assert state.success == SAVED_MESSAGE
    assert state.error == "Failed: 502"
    assert state.form == FormState()
    assert state.submitting is False


@responses.activate
def test_submit_without_argument_uses_current_form_state(form, state):
    responses.add(responses.POST, REVIEWS_URL, status=201)
    responses.add(responses.GET, REVIEWS_URL, json=[])
    state.form = FormState(title="Up", review="Balloons", rating=10)

    form.submit()

    assert json.loads(responses.calls[0].request.body)["title"] == "Up"
    assert state.success == SAVED_MESSAGE
