import asyncio

import httpx
import pytest

from guessword.errors import ScoringUnavailableError
from guessword.scoring_client import ScoringClient, parse_score


def _client(handler):
    return ScoringClient(base_url="https://scoring.test/api", path="/guess", transport=httpx.MockTransport(handler))


def test_score_sends_word_and_date():
    seen = {}

    def handler(request):
        seen["url"] = request.url
        return httpx.Response(200, json={"doubleScore": 0.4213, "correct": False})

    result = asyncio.run(_client(handler).score("面包", "20240309"))
    assert result.similarity == pytest.approx(0.4213)
    assert result.correct is False
    assert seen["url"].path == "/api/guess"
    assert seen["url"].params["date"] == "20240309"
    assert seen["url"].params["word"] == "面包"


def test_http_error_is_unavailable():
    client = _client(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(ScoringUnavailableError):
        asyncio.run(client.score("apple", "20240309"))


def test_transport_error_is_unavailable():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ScoringUnavailableError):
        asyncio.run(_client(handler).score("apple", "20240309"))


def test_non_json_body_is_unavailable():
    client = _client(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(ScoringUnavailableError):
        asyncio.run(client.score("apple", "20240309"))


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"doubleScore": 0.5}, 0.5),
        ({"similarity": 0.25}, 0.25),
        ({}, 0.0),
        ({"doubleScore": None}, 0.0),
        ({"doubleScore": "abc"}, 0.0),
        ({"doubleScore": "0.6"}, 0.6),
        ({"doubleScore": float("nan")}, 0.0),
        ({"doubleScore": True}, 0.0),
        ({"doubleScore": 1.7}, 1.0),
        ({"doubleScore": -0.2}, 0.0),
        ({"doubleScore": 10**400}, 0.0),
    ],
)
def test_untrusted_similarity_is_sanitized(payload, expected):
    assert parse_score(payload).similarity == pytest.approx(expected)


def test_correct_forces_full_similarity():
    result = parse_score({"doubleScore": 0.99, "correct": True})
    assert result.correct is True
    assert result.similarity == 1.0


def test_non_object_payload_rejected():
    with pytest.raises(ScoringUnavailableError):
        parse_score([0.5])


def test_oversized_score_recorded_as_zero(repo):
    from guessword.session_store import SessionStore

    body = '{"doubleScore": 1' + "0" * 400 + ', "correct": false}'
    client = _client(lambda request: httpx.Response(200, text=body, headers={"content-type": "application/json"}))
    store = SessionStore(repo, client)
    store.select_date("20240309")

    record = asyncio.run(store.submit_guess("apple"))
    assert record.similarity == 0.0
    assert store.get_session().attempt_count == 1
