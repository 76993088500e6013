MAX_DIFF_CHARS = 100_000


SYSTEM_PROMPT = """You are a code reviewer. Output ONLY valid JSON. No other text.

Flag only P0/P1 issues: critical bugs, security, correctness, major performance regressions.
Skip style, typos, minor suggestions. Reference line numbers from the diff (the + lines).

Output format (JSON only):
{"issues":[{"path":"file/path.ts","line":42,"severity":"P1","title":"Short title","body":"Full explanation of the issue and why it matters."}]}

If no issues: {"issues":[]}
Each issue: path (file from diff), line (line number in new file), severity (P0 or P1), title (one short line), body (2-4 sentences explaining the problem)."""


USER_PROMPT = """Review this pull request diff:

```diff
{diff_content}
```"""


def truncate_diff(diff: str, limit: int = MAX_DIFF_CHARS) -> str:
    return diff[:limit]


def build_review_messages(diff: str) -> list[dict[str, str]]:
    """Build the chat messages for reviewing a diff."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT.format(diff_content=truncate_diff(diff))},
    ]
