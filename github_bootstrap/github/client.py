"""Sets up the authenticated githubkit client."""

import httpx
from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

DEFAULT_GITHUB_API_URL = "https://api.github.com"


def get_github_token_client(
    github_token: str,
    user_agent: str,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
    timeout: float | None = None,
    async_transport: httpx.AsyncBaseTransport | None = None,
) -> GitHub[TokenAuthStrategy]:
    """Returns a GitHub client authenticated with an access token.

    Requests carry ``Authorization: token <github_token>`` and the given
    User-Agent. Caching and githubkit's automatic rate limit retries are
    disabled so every call reaches GitHub exactly once. ``async_transport``
    replaces the network transport, e.g. with ``httpx.MockTransport``.
    """
    if not github_token:
        raise RuntimeError("GitHub token authentication requires an access token.")
    return GitHub(
        auth=TokenAuthStrategy(github_token),
        base_url=github_api_url,
        user_agent=user_agent,
        timeout=timeout,
        http_cache=False,
        auto_retry=False,
        async_transport=async_transport,
    )
