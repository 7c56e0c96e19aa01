"""
Domain models for the GitHub repos report.

This module provides clean domain objects that isolate the report logic
from the REST payload format, implementing an anti-corruption layer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from .models import RepoPayload


@dataclass(frozen=True)
class Repository:
    """Immutable domain model representing one listed GitHub repository."""

    name: str
    pushed_at: datetime
    updated_at: datetime
    watchers_count: int
    open_issues_count: int

    def describe(self) -> str:
        """Single-line rendering of every tracked field."""
        return (
            f"[Name:{self.name} UpdatedAt:{self.updated_at} "
            f"PushedAt:{self.pushed_at} WatchersCount:{self.watchers_count} "
            f"OpenIssuesCount:{self.open_issues_count}]"
        )


@dataclass(frozen=True)
class ReportSummary:
    """Immutable aggregate statistics over a list of repositories."""

    total_open_issues: int = 0
    max_watchers: int = 0
    most_watched: Tuple[str, ...] = ()

    @property
    def most_watched_label(self) -> str:
        """Comma-joined names holding the watcher maximum."""
        if not self.most_watched:
            return "<NONE>"
        return ",".join(self.most_watched)


class ApiError(Exception):
    """Base exception for errors while fetching the listing."""

    pass


class TransportError(ApiError):
    """Exception raised when a request cannot be built or sent."""

    pass


class ParseError(ApiError):
    """Exception raised when a page body is not a JSON array of repositories."""

    pass


class RateLimitError(ParseError):
    """Exception raised when an unparseable page looks like a rate-limit reply."""

    MARKER = "API rate limit exceeded"


class DataIntegrityError(ValueError):
    """Exception raised when a repository carries impossible values."""

    pass


def transform_github_response(payload: RepoPayload) -> Repository:
    """
    Transform a validated REST payload into a domain Repository object.

    This function implements the anti-corruption layer by converting
    the external API format into our internal domain model.
    """
    return Repository(
        name=payload.name,
        pushed_at=payload.pushed_at,
        updated_at=payload.updated_at,
        watchers_count=payload.watchers_count,
        open_issues_count=payload.open_issues_count,
    )
