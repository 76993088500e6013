from pydantic import BaseModel


class PullRequest(BaseModel):
    number: int | None = None


class PullRequestEvent(BaseModel):
    """Subset of the GitHub Actions event payload read by the publisher."""
    pull_request: PullRequest | None = None
