import pytest

from ai_review.config import Settings
from ai_review.models import ChangedLine, FileDiff, Hunk, PRContext


def make_hunk(size: int, start: int = 1) -> Hunk:
    changes = tuple(
        ChangedLine(f"+line {n}", "add", new_line=n) for n in range(start, start + size)
    )
    return Hunk(header=f"@@ -{start},0 +{start},{size} @@", changes=changes)


def make_file(*sizes: int, path: str = "src/app.py") -> FileDiff:
    hunks = []
    start = 1
    for size in sizes:
        hunks.append(make_hunk(size, start))
        start += size + 10
    return FileDiff(path=path, hunks=tuple(hunks))


@pytest.fixture
def settings(monkeypatch):
    for name in ["INPUT_EXCLUDE", "INPUT_MAX_COMMENTS_PER_PR", "INPUT_OPENAI_API_MODEL"]:
        monkeypatch.delenv(name, raising=False)
    return Settings(github_token="gh-token", openai_api_key="sk-test", _env_file=None)


@pytest.fixture
def pr_context():
    return PRContext(
        owner="octo",
        repo="demo",
        pull_number=7,
        title="Add caching layer",
        description="Caches user lookups in memory.",
    )
