from pathlib import Path

from pydantic import BaseModel, model_validator


class Owner(BaseModel):
    login: str


class Repository(BaseModel):
    name: str
    owner: Owner


class PullRequestEvent(BaseModel):
    """Payload события pull_request из GITHUB_EVENT_PATH."""

    action: str | None = None
    number: int
    repository: Repository
    before: str | None = None
    after: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _number_from_pull_request(cls, data):
        if isinstance(data, dict) and "number" not in data:
            pr = data.get("pull_request") or {}
            if "number" in pr:
                data = {**data, "number": pr["number"]}
        return data

    @property
    def owner(self) -> str:
        return self.repository.owner.login

    @property
    def repo(self) -> str:
        return self.repository.name

    @property
    def is_synchronize(self) -> bool:
        return self.action == "synchronize" and bool(self.before and self.after)


def load_event(path: str | Path) -> PullRequestEvent:
    text = Path(path).read_text(encoding="utf-8")
    return PullRequestEvent.model_validate_json(text)
