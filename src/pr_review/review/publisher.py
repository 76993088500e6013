# src/pr_review/review/publisher.py
import json
import logging
from pathlib import Path
from pr_review.config import Settings
from pr_review.models.event import PullRequestEvent
from pr_review.models.review import ReviewIssue
from pr_review.platforms.base import GitPlatform
from pr_review.platforms.github import GitHubClient, split_repo
from .diff import get_commit_sha


logger = logging.getLogger(__name__)

NO_ISSUES_NOTE = "No critical issues found. ✅"


def read_pr_number(event_path: str | None) -> int | None:
    """Read ``pull_request.number`` from a GitHub Actions event payload."""
    if not event_path:
        return None
    try:
        payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
        event = PullRequestEvent.model_validate(payload)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read event payload {event_path}: {e}")
        return None
    if event.pull_request is None:
        return None
    return event.pull_request.number


class ReviewPublisher:
    def __init__(self, settings: Settings, client: GitPlatform | None = None):
        self.settings = settings
        self.client = client

    def _platform(self) -> GitPlatform:
        if self.client is None:
            self.client = GitHubClient(
                token=self.settings.github_token or "",
                api_url=self.settings.github_api_url,
            )
        return self.client

    def _target(self) -> tuple[str, int] | None:
        """(owner/repo, PR number), or None when posting isn't possible."""
        repo = self.settings.github_repository
        pr_number = read_pr_number(self.settings.github_event_path)
        if not self.settings.github_token or split_repo(repo) is None or not pr_number:
            return None
        return repo, pr_number

    def _header(self, commit_id: str) -> str:
        return (
            f"💡 {self.settings.reviewer_name}\n\n"
            "Here are some automated review suggestions for this pull request.\n\n"
            f"**Reviewed commit:** `{commit_id[:9]}`"
        )

    async def publish_issues(self, issues: list[ReviewIssue]) -> bool:
        """Post one review with an inline comment per issue."""
        target = self._target()
        if target is None:
            logger.warning("Missing GITHUB_TOKEN, GITHUB_REPOSITORY, or PR number. Skipping review.")
            return False
        repo, pr_number = target

        commit_id = await get_commit_sha(self.settings)
        body = self._header(commit_id)
        if not issues:
            body = f"{body}\n\n{NO_ISSUES_NOTE}"

        comments = [
            {
                "path": issue.path,
                "line": issue.line,
                "side": "RIGHT",
                "body": issue.format_comment(),
            }
            for issue in issues
        ]

        await self._platform().create_review(repo, pr_number, commit_id, body, comments)
        logger.info(f"Posted review with {len(comments)} line comment(s)")
        return True

    async def publish_raw(self, raw_text: str) -> bool:
        """Post the unparsed model reply as the review body."""
        target = self._target()
        if target is None:
            logger.warning("Missing GITHUB_TOKEN, GITHUB_REPOSITORY, or PR number. Skipping.")
            return False
        repo, pr_number = target

        commit_id = await get_commit_sha(self.settings)
        body = f"{self._header(commit_id)}\n\n---\n\n{raw_text}"

        await self._platform().create_review(repo, pr_number, commit_id, body, [])
        logger.info("Posted review (fallback, no line comments)")
        return True
