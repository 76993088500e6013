from .diff import get_diff, get_commit_sha, NO_CHANGES_PLACEHOLDER
from .parser import parse_diff, DiffFile
from .prompts import build_review_messages, MAX_DIFF_CHARS
from .interpreter import extract_json_object, parse_issues, interpret_review
from .publisher import ReviewPublisher
from .engine import ReviewEngine, EngineReviewResult

__all__ = [
    "get_diff",
    "get_commit_sha",
    "NO_CHANGES_PLACEHOLDER",
    "parse_diff",
    "DiffFile",
    "build_review_messages",
    "MAX_DIFF_CHARS",
    "extract_json_object",
    "parse_issues",
    "interpret_review",
    "ReviewPublisher",
    "ReviewEngine",
    "EngineReviewResult",
]
