# src/pr_review/review/engine.py
import logging
from dataclasses import dataclass
from pr_review.providers.base import LLMProvider
from .interpreter import interpret_review
from .publisher import ReviewPublisher


logger = logging.getLogger(__name__)


@dataclass
class EngineReviewResult:
    """Result of one review run."""
    issues_count: int
    fallback: bool
    posted: bool


class ReviewEngine:
    def __init__(self, provider: LLMProvider, publisher: ReviewPublisher):
        self.provider = provider
        self.publisher = publisher

    async def run(self, diff: str) -> EngineReviewResult:
        """Ask the LLM to review the diff and post whatever comes back."""
        logger.info("Sending to Z.AI GLM for review...")
        raw_review = await self.provider.review(diff)

        outcome = interpret_review(raw_review)
        if outcome.is_fallback:
            posted = await self.publisher.publish_raw(outcome.raw_text)
            return EngineReviewResult(issues_count=0, fallback=True, posted=posted)

        issues = outcome.issues
        logger.info(f"Found {len(issues)} issue(s)")
        for issue in issues:
            logger.info(f"  - {issue.severity} {issue.path}:{issue.line} {issue.title}")

        logger.info("Posting review to PR...")
        posted = await self.publisher.publish_issues(issues)
        return EngineReviewResult(issues_count=len(issues), fallback=False, posted=posted)
