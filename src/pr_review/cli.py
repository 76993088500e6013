"""CLI entry point for pr-review.

Runs once per CI job: fetch the diff of the latest commit, have the LLM review
it, and post the result as a review on the pull request.

Environment variables:
  Z_AI_API_KEY        Z.AI API key (required unless --dry-run)
  GITHUB_TOKEN        token allowed to create pull request reviews
  GITHUB_REPOSITORY   owner/repo
  GITHUB_EVENT_PATH   event payload carrying pull_request.number
  GITHUB_SHA          commit to anchor the review to (defaults to HEAD)
"""

import asyncio
import logging
import sys

import click

from pr_review.config import Settings
from pr_review.providers.zai import ZaiProvider
from pr_review.review.diff import get_diff
from pr_review.review.engine import ReviewEngine
from pr_review.review.parser import format_summary, parse_diff
from pr_review.review.publisher import ReviewPublisher


logger = logging.getLogger(__name__)

PREVIEW_CHARS = 2000


def print_preview(diff: str) -> None:
    summary = format_summary(parse_diff(diff))
    if summary:
        click.echo("\n--- Changed files ---\n")
        click.echo(summary)
    click.echo(f"\n--- Diff preview (first {PREVIEW_CHARS} chars) ---\n")
    click.echo(diff[:PREVIEW_CHARS])
    if len(diff) > PREVIEW_CHARS:
        click.echo("\n... (truncated)")


async def run(settings: Settings, dry_run: bool) -> None:
    logger.info("Fetching PR diff...")
    diff = await get_diff()
    logger.info(f"Diff length: {len(diff)} chars")

    if dry_run:
        print_preview(diff)
        click.echo("\n✓ Dry run complete. Run without --dry-run to call Z.AI (requires Z_AI_API_KEY).")
        return

    engine = ReviewEngine(
        provider=ZaiProvider(settings),
        publisher=ReviewPublisher(settings),
    )
    await engine.run(diff)
    logger.info("Done.")


@click.command("pr-review")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Fetch and preview the diff without calling Z.AI or GitHub.",
)
def main(dry_run: bool):
    """Review the latest commit of a pull request with Z.AI GLM."""
    try:
        settings = Settings()
        logging.basicConfig(level=settings.log_level)
        asyncio.run(run(settings, dry_run))
    except Exception as e:
        logger.exception(f"Review failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
