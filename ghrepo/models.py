"""
Wire models for the GitHub repos listing endpoint.

These Pydantic models describe one page of the REST response exactly as
GitHub sends it. Missing or null fields fall back to zero values so that a
sparse payload still decodes, mirroring how the listing is consumed.
"""

from datetime import datetime, timezone
from typing import List, Optional

from dateutil import parser as date_parser
from pydantic import BaseModel, TypeAdapter, field_validator

# Zero value for timestamps the API leaves out
ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


class RepoPayload(BaseModel):
    """
    One repository object from a page of the listing.

    Only the fields the report needs are declared; everything else in the
    GitHub payload is ignored.
    """
    name: str = ""                  # Repository name (e.g., "ghrepo")
    pushed_at: datetime = ZERO_TIME  # Last push to any branch
    updated_at: datetime = ZERO_TIME  # Last change to the repository object
    watchers_count: int = 0          # May be negative in corrupt data; checked later
    open_issues_count: int = 0

    @field_validator("name", "watchers_count", "open_issues_count", mode="before")
    @classmethod
    def null_to_zero(cls, v, info):
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("pushed_at", "updated_at", mode="before")
    @classmethod
    def parse_datetime(cls, v):
        """
        Parse ISO-8601 strings from the GitHub API into aware datetimes.

        Naive values are taken as UTC so every timestamp compares cleanly.
        """
        if v is None:
            return ZERO_TIME
        if isinstance(v, str):
            v = date_parser.isoparse(v)
        if isinstance(v, datetime) and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


page_adapter = TypeAdapter(Optional[List[RepoPayload]])


def parse_page(body: bytes) -> List[RepoPayload]:
    """Validate a raw response body as a JSON array of repositories.

    A JSON null decodes as an empty page. Raises pydantic.ValidationError
    when the body is neither null nor such an array.
    """
    return page_adapter.validate_json(body) or []
