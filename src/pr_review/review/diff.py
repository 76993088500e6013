# src/pr_review/review/diff.py
import asyncio
import logging
from pr_review.config import Settings
from pr_review.errors import VcsError


logger = logging.getLogger(__name__)

NO_CHANGES_PLACEHOLDER = "(No file changes in this PR)"


async def _run_git(*args: str) -> str:
    """Run a git command and return its stdout, raising VcsError on failure."""
    proc = await asyncio.create_subprocess_exec(
        "git",
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    # communicate() drains both pipes before waiting on the exit code
    stdout, stderr = await proc.communicate()
    err_text = stderr.decode("utf-8", errors="replace")
    if proc.returncode != 0:
        logger.error(f"git {' '.join(args)} stderr: {err_text}")
        raise VcsError(
            f"git {args[0]} failed with code {proc.returncode}",
            returncode=proc.returncode,
            stderr=err_text,
        )
    return stdout.decode("utf-8", errors="replace")


async def get_diff(base: str = "HEAD~1", head: str = "HEAD") -> str:
    """Unified diff between two revisions, or a placeholder when nothing changed."""
    diff = await _run_git("diff", base, head)
    if not diff.strip():
        return NO_CHANGES_PLACEHOLDER
    return diff


async def get_commit_sha(settings: Settings) -> str:
    if settings.github_sha:
        return settings.github_sha
    return (await _run_git("rev-parse", "HEAD")).strip()
