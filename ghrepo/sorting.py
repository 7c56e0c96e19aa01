"""
Sort strategies for the repository report.

A SortSpec pairs one timestamp field with a direction. It is a plain value:
the report selects one with select_sort() and hands it the record list.
"""

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import List

from .domain import Repository


class SortField(enum.Enum):
    """Timestamp fields a report can be ordered by."""

    UPDATED = ("updated_at", "byUpdatedAt")
    PUSHED = ("pushed_at", "byPushedAt")

    def __init__(self, attribute: str, label: str):
        self.attribute = attribute
        self.label = label


@dataclass(frozen=True)
class SortSpec:
    """Strategy for ordering repositories by one timestamp field."""

    field: SortField = SortField.UPDATED
    ascending: bool = False

    @property
    def title(self) -> str:
        direction = "ascending" if self.ascending else "descending"
        return f"{self.field.label} {direction}"

    def sort_key(self, repo: Repository) -> datetime:
        return getattr(repo, self.field.attribute)

    def render(self, repo: Repository) -> str:
        """Sort key value in its native text form."""
        return str(self.sort_key(repo))

    def sort(self, repos: List[Repository]) -> None:
        """Sort in place; ascending puts the earliest timestamp first."""
        repos.sort(key=self.sort_key, reverse=not self.ascending)


def select_sort(
    by_pushed_at: bool = False, by_updated_at: bool = False, ascending: bool = False
) -> SortSpec:
    """
    Pick the sort strategy from the CLI toggles.

    The pushed field wins when both toggles are set; updated is the default.
    """
    if by_pushed_at:
        return SortSpec(SortField.PUSHED, ascending)
    return SortSpec(SortField.UPDATED, ascending)


class SortedView:
    """Repositories sorted by a SortSpec, with per-index accessors for output."""

    def __init__(self, repos: List[Repository], spec: SortSpec):
        self.repos = repos
        self.spec = spec
        spec.sort(self.repos)

    @property
    def title(self) -> str:
        return self.spec.title

    def __len__(self) -> int:
        return len(self.repos)

    def name(self, i: int) -> str:
        return self.repos[i].name

    def field(self, i: int) -> str:
        return self.spec.render(self.repos[i])
