"""Unit tests for the GitHubRequestExecutor."""

import json
from typing import Callable

import httpx
import pytest

from github_bootstrap.github.client import get_github_token_client
from github_bootstrap.github.exceptions import HttpStatusError, MalformedResponseError, TransportError
from github_bootstrap.github.executor import GitHubRequestExecutor


class TransportRecorder:
    """Serves canned httpx responses and records every request it receives."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        """Initialize the recorder with a function producing the response."""
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        """Record the request and answer it."""
        self.requests.append(request)
        return self.respond(request)


def make_executor(respond: Callable[[httpx.Request], httpx.Response]) -> tuple[GitHubRequestExecutor, TransportRecorder]:
    """Create an executor for owner ``acme`` whose client talks to a mock transport."""
    recorder = TransportRecorder(respond)
    client = get_github_token_client("tkn123", user_agent="acme", async_transport=httpx.MockTransport(recorder))
    return GitHubRequestExecutor(client), recorder


def reply(status_code: int, content: str = "", headers: dict[str, str] | None = None) -> Callable[[httpx.Request], httpx.Response]:
    """Build a responder always returning the same status and body."""

    def respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=content.encode("utf-8"), headers=headers)

    return respond


@pytest.mark.asyncio
async def test_requests_carry_token_and_user_agent() -> None:
    """Test that every request is authenticated with the token scheme and names the owner."""
    executor, recorder = make_executor(reply(200, "[]", {"content-type": "application/json"}))

    await executor.call("GET", "/repos/acme/widgets/labels")

    request = recorder.requests[0]
    assert request.method == "GET"
    assert request.url == httpx.URL("https://api.github.com/repos/acme/widgets/labels")
    assert request.headers["Authorization"] == "token tkn123"
    assert request.headers["User-Agent"] == "acme"


@pytest.mark.asyncio
async def test_no_content_returns_none() -> None:
    """Test that a 204 yields no result and the encoded path is kept."""
    executor, recorder = make_executor(reply(204))

    assert await executor.call("DELETE", "/repos/acme/widgets/labels/good%20first%20issue") is None
    assert recorder.requests[0].url.raw_path == b"/repos/acme/widgets/labels/good%20first%20issue"


@pytest.mark.asyncio
async def test_ok_returns_parsed_body() -> None:
    """Test that a 200 with a JSON body returns the parsed object."""
    executor, _ = make_executor(reply(200, '[{"name": "stale", "color": "ededed"}]', {"content-type": "application/json"}))

    assert await executor.call("GET", "/repos/acme/widgets/labels") == [{"name": "stale", "color": "ededed"}]


@pytest.mark.asyncio
async def test_ok_with_unparsable_body_raises_malformed_response() -> None:
    """Test that a 200 whose body is not JSON raises MalformedResponseError."""
    executor, _ = make_executor(reply(200, "<html>oops</html>", {"content-type": "text/html"}))

    with pytest.raises(MalformedResponseError) as exc_info:
        await executor.call("GET", "/repos/acme/widgets/labels")

    assert exc_info.value.status_code == 200


@pytest.mark.asyncio
async def test_not_found_raises_http_status_error() -> None:
    """Test that a 404 surfaces GitHub's message."""
    executor, _ = make_executor(reply(404, '{"message": "Not Found"}', {"content-type": "application/json"}))

    with pytest.raises(HttpStatusError) as exc_info:
        await executor.call("GET", "/repos/acme/widgets/labels")

    assert str(exc_info.value) == "HTTP status code 404: Not Found"
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Not Found"


@pytest.mark.asyncio
async def test_rate_limited_request_is_not_retried() -> None:
    """Test that a rate limited 403 is reported once as an HttpStatusError."""
    executor, recorder = make_executor(
        reply(
            403,
            '{"message": "API rate limit exceeded"}',
            {"content-type": "application/json", "x-ratelimit-remaining": "0", "x-ratelimit-reset": "0"},
        )
    )

    with pytest.raises(HttpStatusError, match="HTTP status code 403: API rate limit exceeded"):
        await executor.call("GET", "/repos/acme/widgets/labels")

    assert len(recorder.requests) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        pytest.param("<html>Internal Server Error</html>", id="html body"),
        pytest.param('{"error": "boom"}', id="no message field"),
        pytest.param('["boom"]', id="not an object"),
    ],
)
async def test_malformed_error_body_raises_malformed_response(body: str) -> None:
    """Test that an error body without a usable message raises MalformedResponseError."""
    executor, _ = make_executor(reply(500, body))

    with pytest.raises(MalformedResponseError) as exc_info:
        await executor.call("GET", "/repos/acme/widgets/labels")

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        pytest.param(httpx.ConnectError, id="connection refused"),
        pytest.param(httpx.ReadTimeout, id="timeout"),
    ],
)
async def test_transport_failure_raises_transport_error(error: type[httpx.TransportError]) -> None:
    """Test that network level failures raise TransportError."""

    def respond(request: httpx.Request) -> httpx.Response:
        raise error("boom", request=request)

    executor, _ = make_executor(respond)

    with pytest.raises(TransportError):
        await executor.call("GET", "/repos/acme/widgets/labels")


@pytest.mark.asyncio
async def test_body_sent_as_json() -> None:
    """Test that a request body is sent as JSON."""
    executor, recorder = make_executor(reply(201, '{"name": "bug", "color": "fff"}', {"content-type": "application/json"}))

    result = await executor.call("POST", "/repos/acme/widgets/labels", body={"name": "bug", "color": "fff"})

    assert json.loads(recorder.requests[0].content) == {"name": "bug", "color": "fff"}
    assert result == {"name": "bug", "color": "fff"}


@pytest.mark.asyncio
async def test_request_without_body_sends_no_content() -> None:
    """Test that requests without a body do not send one."""
    executor, recorder = make_executor(reply(204))

    await executor.call("DELETE", "/repos/acme/widgets/labels/stale")

    assert recorder.requests[0].content == b""


def test_client_requires_token() -> None:
    """Test that a client cannot be built without a token."""
    with pytest.raises(RuntimeError):
        get_github_token_client("", user_agent="acme")
