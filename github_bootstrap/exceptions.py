"""Base exception shared by every error the application raises on purpose."""


class GitHubBootstrapError(Exception):
    """Base class for all expected github-bootstrap failures."""

    pass
