"""Tests for the mailboxlayer deliverability client."""

import httpx
import pytest

from inkpress.core.errors import ExternalServiceError
from tests.conftest import build_checker


def test_request_carries_key_and_flags() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"smtp_check": True, "score": 0.9})

    assert build_checker(handler).is_deliverable("reader@example.com") is True
    params = seen[0].url.params
    assert params["access_key"] == "test-key"
    assert params["email"] == "reader@example.com"
    assert params["smtp"] == "1"
    assert params["format"] == "1"


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ({"smtp_check": True, "score": 0.5}, True),
        ({"smtp_check": True, "score": 0.49}, False),
        ({"smtp_check": False, "score": 0.96}, False),
        ({"smtp_check": True}, False),
    ],
)
def test_verdict(payload: dict, expected: bool) -> None:
    checker = build_checker(lambda request: httpx.Response(200, json=payload))
    assert checker.is_deliverable("reader@example.com") is expected


def test_api_error_payload_is_external_failure() -> None:
    payload = {"success": False, "error": {"code": 101, "type": "invalid_access_key"}}
    checker = build_checker(lambda request: httpx.Response(200, json=payload))
    with pytest.raises(ExternalServiceError):
        checker.is_deliverable("reader@example.com")


def test_invalid_json_is_external_failure() -> None:
    checker = build_checker(lambda request: httpx.Response(200, content=b"<html>"))
    with pytest.raises(ExternalServiceError):
        checker.is_deliverable("reader@example.com")


def test_transport_error_is_external_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(ExternalServiceError):
        build_checker(handler).is_deliverable("reader@example.com")


def test_string_flags_are_parsed() -> None:
    payload = {"smtp_check": "false", "score": "0.9"}
    checker = build_checker(lambda request: httpx.Response(200, json=payload))
    assert checker.is_deliverable("reader@example.com") is False


@pytest.mark.parametrize(
    "payload",
    [{"smtp_check": True, "score": "high"}, {"smtp_check": "maybe", "score": 0.9}, [1, 2]],
)
def test_malformed_payload_is_external_failure(payload: object) -> None:
    checker = build_checker(lambda request: httpx.Response(200, json=payload))
    with pytest.raises(ExternalServiceError):
        checker.is_deliverable("reader@example.com")
