"""
Summary report over a list of repositories.

The aggregate numbers are computed before anything is written, so a
data-integrity failure never leaves a partial report in the output.
"""

import logging
from typing import List, TextIO

from .domain import Repository, ReportSummary, DataIntegrityError
from .sorting import SortSpec, SortedView

logger = logging.getLogger(__name__)

REPORT_NAME = "GitHubReposReportSummary"


def summarize(repos: List[Repository]) -> ReportSummary:
    """
    Total the open issues and find the most watched repositories in one pass.

    A later repository with strictly more watchers replaces the current
    leaders; one with an equal, positive count joins them. Zero watchers
    never make a leader.
    """
    total_open_issues = 0
    max_watchers = 0
    most_watched: List[str] = []
    for repo in repos:
        if repo.watchers_count < 0:
            raise DataIntegrityError(f"WatchersCount is negative! {repo.describe()}")
        total_open_issues += repo.open_issues_count
        if repo.watchers_count > max_watchers:
            max_watchers = repo.watchers_count
            most_watched = [repo.name]
        elif repo.watchers_count > 0 and repo.watchers_count == max_watchers:
            most_watched.append(repo.name)

    return ReportSummary(
        total_open_issues=total_open_issues,
        max_watchers=max_watchers,
        most_watched=tuple(most_watched),
    )


def write_report(
    repos: List[Repository], url: str, writer: TextIO, sort_spec: SortSpec
) -> ReportSummary:
    """
    Write the summary report for ``repos`` fetched from ``url``.

    ``repos`` is sorted in place according to ``sort_spec``.
    """
    summary = summarize(repos)
    view = SortedView(repos, sort_spec)
    logger.debug(f"📝 Writing report for {len(view)} repositories, {view.title}")

    writer.write(f"{REPORT_NAME}:\nPublic accessible info for {url}\n")
    writer.write(
        f"totOpenIssues:{summary.total_open_issues} "
        f"mostWatchersRepo:{summary.most_watched_label} "
        f"[maxWatchers:{summary.max_watchers}]\n"
    )
    writer.write(f"Repos [{len(view)}] sorted by {view.title}:\n")
    for i in range(len(view)):
        writer.write(f"i:{i:2d} {view.field(i)} {view.name(i)}\n")
    writer.write(f"<endOfReport: {REPORT_NAME}>\n")
    return summary
