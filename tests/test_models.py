"""Tests for domain models."""

from __future__ import annotations

import pydantic
import pytest

from core.domain.models import Feedback, SearchRequest, SearchResult, SearchSource
from core.errors import SourceRequestError


def test_source_names_follow_declaration_order():
    assert SearchSource.names() == ["crates", "npm", "jsdelivr", "docker"]


def test_search_request_defaults_and_coercion():
    request = SearchRequest(source="npm")

    assert request.source is SearchSource.NPM
    assert request.query == ""
    assert request.page is None
    assert request.per_page is None


@pytest.mark.parametrize("field,value", [("page", -1), ("per_page", 0)])
def test_search_request_rejects_bad_paging(field, value):
    with pytest.raises(pydantic.ValidationError):
        SearchRequest(source="crates", **{field: value})


def test_search_result_timestamp_is_utc():
    result = SearchResult(source="docker", query="nginx", payload={"results": []})

    assert result.fetched_at.tzinfo is not None
    assert result.model_dump(mode="json")["source"] == "docker"


def test_feedback_from_error():
    error = SourceRequestError("https://crates.io/api/v1/crates", "timed out")

    assert Feedback.from_error(error).model_dump() == {
        "items": [
            {
                "title": "Error",
                "subtitle": "Request to https://crates.io/api/v1/crates failed: timed out",
            }
        ]
    }
