"""Error Handlers — envelope shape for the catch-all and domain handlers."""

import json

from starlette.requests import Request

from app.api.error_handlers import handle_spaces_error, handle_unexpected_error
from app.core.errors import ErrorContext, SpaceConflictError


def _request(path="/api/v1/spaces") -> Request:
    return Request({
        "type": "http", "method": "GET", "path": path,
        "query_string": b"", "headers": [],
    })


async def test_unexpected_error_hides_exception_text():
    res = await handle_unexpected_error(_request(), RuntimeError("secret dsn"))

    assert res.status_code == 500
    body = json.loads(res.body)["error"]
    assert body["code"] == "INTERNAL_ERROR"
    assert body["category"] == "internal"
    assert body["severity"] == "critical"
    assert "secret dsn" not in body["message"]


async def test_spaces_error_uses_its_own_status_and_envelope():
    err = SpaceConflictError(
        "duplicate default", ErrorContext(space_id="known-space", user_id="known-owner"),
    )

    res = await handle_spaces_error(_request(), err)

    assert res.status_code == 409
    assert json.loads(res.body) == json.loads(json.dumps(err.to_response()))
