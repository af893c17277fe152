import json

import pytest
from github import GithubException
from typer.testing import CliRunner

from ai_review import cli

runner = CliRunner()


@pytest.fixture
def inputs(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INPUT_GITHUB_TOKEN", "gh-token")
    monkeypatch.setenv("INPUT_OPENAI_API_KEY", "sk-test")
    return monkeypatch


@pytest.fixture
def event_file(tmp_path):
    path = tmp_path / "event.json"
    path.write_text(json.dumps({
        "action": "opened",
        "number": 3,
        "repository": {"name": "demo", "owner": {"login": "octo"}},
    }))
    return path


class RecordingAgent:
    instances = []
    error = None

    def __init__(self, settings, github):
        self.settings = settings
        self.github = github
        self.calls = []
        RecordingAgent.instances.append(self)

    def run(self, event, dry_run=False):
        self.calls.append(("run", event.number, dry_run))
        if RecordingAgent.error:
            raise RecordingAgent.error
        return []

    def review(self, pr, dry_run=False):
        self.calls.append(("review", pr, dry_run))
        if RecordingAgent.error:
            raise RecordingAgent.error
        return []


@pytest.fixture
def agent(monkeypatch):
    RecordingAgent.instances = []
    RecordingAgent.error = None
    monkeypatch.setattr(cli, "ReviewerAgent", RecordingAgent)
    return RecordingAgent


class TestRunCommand:
    def test_success(self, inputs, event_file, agent):
        result = runner.invoke(cli.app, ["run", "--event-path", str(event_file)])
        assert result.exit_code == 0, result.output
        instance = agent.instances[0]
        assert instance.calls == [("run", 3, False)]
        assert instance.github.owner == "octo"
        assert instance.github.repo_name == "demo"

    def test_event_path_from_env(self, inputs, event_file, agent):
        inputs.setenv("GITHUB_EVENT_PATH", str(event_file))
        result = runner.invoke(cli.app, ["run", "--dry-run"])
        assert result.exit_code == 0, result.output
        assert agent.instances[0].calls == [("run", 3, True)]

    def test_missing_event_file(self, inputs, tmp_path, agent):
        result = runner.invoke(cli.app, ["run", "--event-path", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert agent.instances == []

    def test_missing_token(self, inputs, event_file, agent):
        inputs.delenv("INPUT_GITHUB_TOKEN")
        result = runner.invoke(cli.app, ["run", "--event-path", str(event_file)])
        assert result.exit_code == 1

    def test_github_error(self, inputs, event_file, agent):
        agent.error = GithubException(404, {"message": "Not Found"}, None)
        result = runner.invoke(cli.app, ["run", "--event-path", str(event_file)])
        assert result.exit_code == 1


class TestReviewCommand:
    def test_overrides(self, inputs, agent):
        result = runner.invoke(cli.app, [
            "review", "--repo", "octo/demo", "--pr", "5",
            "--model", "gpt-4o", "--exclude", "*.md", "--max-comments", "3", "--dry-run",
        ])
        assert result.exit_code == 0, result.output
        instance = agent.instances[0]
        assert instance.calls == [("review", 5, True)]
        assert instance.settings.openai_api_model == "gpt-4o"
        assert instance.settings.exclude_patterns == ["*.md"]
        assert instance.settings.max_comments_per_pr == 3

    def test_bad_repo(self, inputs, agent):
        result = runner.invoke(cli.app, ["review", "--repo", "demo", "--pr", "5"])
        assert result.exit_code == 1
        assert agent.instances == []

    def test_unexpected_error(self, inputs, agent):
        agent.error = RuntimeError("boom")
        result = runner.invoke(cli.app, ["review", "--repo", "octo/demo", "--pr", "5"])
        assert result.exit_code == 1
