import httpx
from github import Auth, Github
from github.PullRequest import PullRequest
from github.Repository import Repository

from ai_review.models import InlineComment, PRContext

DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"


class GitHubClient:
    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        api_url: str = "https://api.github.com",
    ):
        self.owner = owner
        self.repo_name = repo
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.github = Github(auth=Auth.Token(token), base_url=self.api_url)
        self._repo: Repository | None = None

    @property
    def repo(self) -> Repository:
        if self._repo is None:
            self._repo = self.github.get_repo(f"{self.owner}/{self.repo_name}")
        return self._repo

    def get_pr(self, number: int) -> PullRequest:
        return self.repo.get_pull(number)

    def get_pr_context(self, number: int) -> PRContext:
        pr = self.get_pr(number)
        return PRContext(
            owner=self.owner,
            repo=self.repo_name,
            pull_number=number,
            title=pr.title or "",
            description=pr.body or "",
        )

    def get_pr_diff(self, number: int) -> str:
        return self._get_diff(f"/repos/{self.owner}/{self.repo_name}/pulls/{number}")

    def compare_diff(self, base: str, head: str) -> str:
        return self._get_diff(f"/repos/{self.owner}/{self.repo_name}/compare/{base}...{head}")

    def _get_diff(self, path: str) -> str:
        resp = httpx.get(
            f"{self.api_url}{path}",
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": DIFF_MEDIA_TYPE,
            },
            follow_redirects=True,
        )
        resp.raise_for_status()
        return resp.text

    def create_review(self, number: int, comments: list[InlineComment]) -> None:
        pr = self.get_pr(number)
        pr.create_review(
            event="COMMENT",
            comments=[c.as_payload() for c in comments],
        )
