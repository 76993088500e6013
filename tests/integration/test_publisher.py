# tests/integration/test_publisher.py
import json
import pytest
from pr_review.config import Settings
from pr_review.models.review import ReviewIssue
from pr_review.review.publisher import ReviewPublisher, read_pr_number


REVIEWS_URL = "https://api.github.com/repos/octo/app/pulls/7/reviews"
SHA = "0123456789abcdef0123456789abcdef01234567"


@pytest.fixture
def event_path(tmp_path):
    path = tmp_path / "event.json"
    path.write_text(json.dumps({"action": "opened", "pull_request": {"number": 7}}))
    return str(path)


@pytest.fixture
def settings(event_path):
    return Settings(
        github_token="gh-token",
        github_repository="octo/app",
        github_sha=SHA,
        github_event_path=event_path,
    )


def _issue(path, line, severity="P1"):
    return ReviewIssue(path=path, line=line, severity=severity, title=f"Bug in {path}", body="Explanation.")


def _posted(httpx_mock):
    return json.loads(httpx_mock.get_request().content)


def test_read_pr_number(event_path):
    assert read_pr_number(event_path) == 7


@pytest.mark.parametrize(
    "content",
    ['{"ref": "refs/heads/main"}', '{"pull_request": {}}', "not json", '["a"]'],
)
def test_read_pr_number_unresolved(tmp_path, content):
    path = tmp_path / "event.json"
    path.write_text(content)

    assert read_pr_number(str(path)) is None


def test_read_pr_number_missing_file(tmp_path):
    assert read_pr_number(str(tmp_path / "missing.json")) is None
    assert read_pr_number(None) is None


@pytest.mark.asyncio
async def test_publish_issues_posts_one_comment_per_issue(httpx_mock, settings):
    httpx_mock.add_response(url=REVIEWS_URL, method="POST", json={"id": 1})
    issues = [_issue("src/a.ts", 3, "P0"), _issue("src/b.ts", 10), _issue("src/a.ts", 8)]

    posted = await ReviewPublisher(settings).publish_issues(issues)

    assert posted is True
    payload = _posted(httpx_mock)
    assert payload["commit_id"] == SHA
    assert payload["event"] == "COMMENT"
    assert "**Reviewed commit:** `012345678`" in payload["body"]
    assert "No critical issues found" not in payload["body"]
    assert payload["comments"] == [
        {"path": "src/a.ts", "line": 3, "side": "RIGHT", "body": "**P0** Bug in src/a.ts\n\nExplanation."},
        {"path": "src/b.ts", "line": 10, "side": "RIGHT", "body": "**P1** Bug in src/b.ts\n\nExplanation."},
        {"path": "src/a.ts", "line": 8, "side": "RIGHT", "body": "**P1** Bug in src/a.ts\n\nExplanation."},
    ]


@pytest.mark.asyncio
async def test_publish_no_issues(httpx_mock, settings):
    httpx_mock.add_response(url=REVIEWS_URL, json={"id": 1})

    await ReviewPublisher(settings).publish_issues([])

    payload = _posted(httpx_mock)
    assert payload["comments"] == []
    assert payload["body"].startswith("💡 Codex Review\n\n")
    assert payload["body"].endswith("No critical issues found. ✅")


@pytest.mark.asyncio
async def test_publish_raw(httpx_mock, settings):
    httpx_mock.add_response(url=REVIEWS_URL, json={"id": 1})
    raw = "The model said something that is not JSON."

    posted = await ReviewPublisher(settings).publish_raw(raw)

    assert posted is True
    payload = _posted(httpx_mock)
    assert payload["comments"] == []
    assert payload["body"].endswith(f"\n\n---\n\n{raw}")
    assert "**Reviewed commit:** `012345678`" in payload["body"]


@pytest.mark.asyncio
async def test_reviewer_name_in_header(httpx_mock, event_path):
    httpx_mock.add_response(url=REVIEWS_URL, json={"id": 1})
    settings = Settings(
        github_token="t",
        github_repository="octo/app",
        github_sha=SHA,
        github_event_path=event_path,
        reviewer_name="GLM Review",
    )

    await ReviewPublisher(settings).publish_raw("raw")

    assert _posted(httpx_mock)["body"].startswith("💡 GLM Review\n\n")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"github_token": None},
        {"github_repository": None},
        {"github_repository": "no-slash"},
        {"github_repository": "octo/"},
        {"github_repository": "/app"},
        {"github_event_path": None},
    ],
)
async def test_missing_prerequisites_skip(httpx_mock, settings, overrides):
    settings = settings.model_copy(update=overrides)
    publisher = ReviewPublisher(settings)

    assert await publisher.publish_issues([_issue("a.py", 1)]) is False
    assert await publisher.publish_raw("raw") is False
    assert httpx_mock.get_requests() == []


@pytest.mark.asyncio
async def test_publish_uses_injected_client(settings):
    class RecordingClient:
        def __init__(self):
            self.calls = []

        async def create_review(self, repo, pr_number, commit_id, body, comments):
            self.calls.append((repo, pr_number, commit_id, comments))
            return {}

    client = RecordingClient()
    await ReviewPublisher(settings, client=client).publish_issues([_issue("a.py", 1)])

    assert client.calls[0][:3] == ("octo/app", 7, SHA)
    assert len(client.calls[0][3]) == 1
