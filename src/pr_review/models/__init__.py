from .review import ReviewIssue, ReviewOutcome, Severity
from .event import PullRequest, PullRequestEvent

__all__ = [
    "ReviewIssue",
    "ReviewOutcome",
    "Severity",
    "PullRequest",
    "PullRequestEvent",
]
