"""
pytest configuration for ghrepo tests.

This file configures:
1. Test markers for different test types
2. Fixtures for common test data
3. A fake paginated repos endpoint served by aiohttp
"""

import pytest
from datetime import datetime, timezone
from aiohttp import web


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def ts(day: int, hour: int = 0) -> datetime:
    """Aware UTC timestamp in January 2023."""
    return datetime(2023, 1, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def mock_repos_page():
    """Fixture providing one page of the REST repos listing."""
    return [
        {
            "id": 1,
            "name": "alpha",
            "full_name": "test-user/alpha",
            "pushed_at": "2023-01-03T10:00:00Z",
            "updated_at": "2023-01-05T10:00:00Z",
            "watchers_count": 5,
            "open_issues_count": 2,
        },
        {
            "id": 2,
            "name": "beta",
            "full_name": "test-user/beta",
            "pushed_at": "2023-01-04T10:00:00Z",
            "updated_at": "2023-01-02T10:00:00Z",
            "watchers_count": 5,
            "open_issues_count": 1,
        },
        {
            "id": 3,
            "name": "gamma",
            "full_name": "test-user/gamma",
            "pushed_at": "2023-01-01T10:00:00Z",
            "updated_at": "2023-01-09T10:00:00Z",
            "watchers_count": 1,
            "open_issues_count": 0,
        },
    ]


@pytest.fixture
def mock_repository_list():
    """Fixture providing a list of domain repositories."""
    from ghrepo.domain import Repository

    return [
        Repository(
            name="repo1",
            pushed_at=ts(3),
            updated_at=ts(5),
            watchers_count=10,
            open_issues_count=4,
        ),
        Repository(
            name="repo2",
            pushed_at=ts(7),
            updated_at=ts(1),
            watchers_count=3,
            open_issues_count=0,
        ),
        Repository(
            name="repo3",
            pushed_at=ts(2),
            updated_at=ts(8),
            watchers_count=10,
            open_issues_count=1,
        ),
    ]


def make_repos_app(
    pages, requested, extra_headers=None, last_link=None, content_types=None
):
    """
    Build an aiohttp app serving ``pages`` at /users/test-user/repos.

    Every page but the last advertises rel="next"; the last one sends
    ``last_link`` as its Link header when given. Each requested page number
    is appended to ``requested`` and, when ``content_types`` is a list, each
    received Content-Type header to it.
    """

    async def list_repos(request):
        page = int(request.query.get("page", "1"))
        requested.append(page)
        if content_types is not None:
            content_types.append(request.headers.get("Content-Type"))
        headers = dict(extra_headers or {})
        if page < len(pages):
            headers["Link"] = (
                f'<{request.url.with_query(page=page + 1)}>; rel="next", '
                f'<{request.url.with_query(page=len(pages))}>; rel="last"'
            )
        elif last_link is not None:
            headers["Link"] = last_link
        body = pages[page - 1]
        if isinstance(body, str):
            return web.Response(text=body, status=403, headers=headers)
        return web.json_response(body, headers=headers)

    app = web.Application()
    app.router.add_get("/users/test-user/repos", list_repos)
    return app


@pytest.fixture
def repos_app_factory():
    """Fixture exposing make_repos_app to tests."""
    return make_repos_app
