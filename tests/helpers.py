import re

ISO_TIMESTAMP = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$')


def assert_error_body(response, status_code, error, details=None):
    """Assert status code and the exact error body shape."""
    assert response.status_code == status_code, response.text
    expected = {"error": error}
    if details is not None:
        expected["details"] = details
    assert response.json() == expected


def assert_chat_reply(payload, text, model):
    """Assert a successful chat payload."""
    assert payload["response"] == text
    assert payload["model"] == model
    assert ISO_TIMESTAMP.match(payload["timestamp"]), f"Bad timestamp: {payload['timestamp']}"
