"""Tests for the structlog processors."""

from asgi_correlation_id import correlation_id

from app.core.logging import SERVICE_NAME, add_correlation_id, add_service_context


def test_request_id_added_only_inside_a_request():
    assert "request_id" not in add_correlation_id(None, "info", {"event": "x"})

    token = correlation_id.set("abc123")
    try:
        assert add_correlation_id(None, "info", {"event": "x"})["request_id"] == "abc123"
    finally:
        correlation_id.reset(token)


def test_service_context_does_not_override_explicit_values():
    event = add_service_context(None, "info", {"event": "x", "env": "staging"})

    assert event["service"] == SERVICE_NAME
    assert event["env"] == "staging"
