"""Contains exceptions raised when talking to the GitHub API."""

from github_bootstrap.exceptions import GitHubBootstrapError


class GitHubApiError(GitHubBootstrapError):
    """Base class for failures of a single GitHub API call."""

    pass


class TransportError(GitHubApiError):
    """Raised when GitHub could not be reached or the request timed out."""

    pass


class HttpStatusError(GitHubApiError):
    """Raised when GitHub answers with a status code above 299."""

    def __init__(self, status_code: int, message: str) -> None:
        """Initializes the exception with the status code and GitHub's error message."""
        super().__init__(f"HTTP status code {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class MalformedResponseError(GitHubApiError):
    """Raised when a response body cannot be parsed into the expected shape."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initializes the exception with a description and the status code, if known."""
        super().__init__(message)
        self.status_code = status_code
