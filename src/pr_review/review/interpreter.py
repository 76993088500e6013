# src/pr_review/review/interpreter.py
import json
import re
import logging
from pydantic import ValidationError
from pr_review.errors import ParseError
from pr_review.models.review import ReviewIssue, ReviewOutcome


logger = logging.getLogger(__name__)

_GREEDY_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def extract_json_object(text: str) -> dict:
    """Find the JSON object in a model reply that may be wrapped in prose.

    The greedy first-``{``-to-last-``}`` span is tried first. When that span
    doesn't decode (e.g. reasoning drafted before the answer, or prose with
    braces), every ``{`` is decoded and the object carrying ``issues`` that
    ends last wins, so the final answer beats earlier drafts.
    """
    match = _GREEDY_OBJECT_RE.search(text)
    candidate = match.group(0) if match else text
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, dict):
        return data

    decoder = json.JSONDecoder()
    best: dict | None = None
    best_end = -1
    for start in (m.start() for m in re.finditer(r"\{", text)):
        try:
            obj, end = decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            continue
        # strict > keeps the outermost object when nested ones share an end
        if isinstance(obj, dict) and "issues" in obj and end > best_end:
            best, best_end = obj, end
    if best is not None:
        return best

    raise ParseError("No JSON object found in model reply")


def parse_issues(text: str) -> list[ReviewIssue]:
    """Parse ``{"issues": [...]}`` out of a model reply.

    A missing ``issues`` key means no issues. Items that don't match the issue
    shape are dropped with a warning; ParseError is raised only when
    ``issues`` isn't a list or none of its items are usable.
    """
    data = extract_json_object(text)
    raw_issues = data.get("issues", [])
    if not isinstance(raw_issues, list):
        raise ParseError(f"Model reply has the wrong shape: issues is {type(raw_issues).__name__}")

    issues = []
    for item in raw_issues:
        try:
            issues.append(ReviewIssue.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Dropping malformed issue {item!r}: {e}")

    if raw_issues and not issues:
        raise ParseError("Model reply has no usable issues")
    return issues


def interpret_review(text: str) -> ReviewOutcome:
    try:
        issues = parse_issues(text)
    except ParseError as e:
        logger.warning(f"Could not parse LLM JSON, posting raw review in body: {e}")
        return ReviewOutcome.fallback(text)
    return ReviewOutcome.structured(issues)
