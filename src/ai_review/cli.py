from pathlib import Path

import httpx
import typer
from github import GithubException
from pydantic import ValidationError
from rich.console import Console

from ai_review.agents import ReviewerAgent
from ai_review.config import Settings, get_settings
from ai_review.github import GitHubClient, load_event

app = typer.Typer(
    name="ai-review",
    help="AI-ревью pull request'ов с inline-замечаниями",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _load_settings(**overrides) -> Settings:
    try:
        return get_settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        err_console.print(f"[red]Некорректная конфигурация: {fields}[/red]")
        raise typer.Exit(1)


def _fail(e: Exception, what: str):
    if isinstance(e, GithubException):
        if e.status == 404:
            err_console.print(f"[red]{what} не найден[/red]")
        else:
            message = e.data.get("message", str(e)) if isinstance(e.data, dict) else str(e)
            err_console.print(f"[red]Ошибка GitHub: {message}[/red]")
    elif isinstance(e, httpx.HTTPStatusError):
        err_console.print(f"[red]Ошибка GitHub: {e.response.status_code} {e.request.url}[/red]")
    else:
        err_console.print(f"[red]Error: {e}[/red]")
    raise typer.Exit(1)


@app.command()
def run(
    event_path: Path = typer.Option(
        ..., "--event-path", "-e", envvar="GITHUB_EVENT_PATH", help="Путь к payload события",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Не публиковать ревью"),
):
    """Ревью PR из GitHub Actions (inputs читаются из INPUT_*)."""
    settings = _load_settings()

    try:
        event = load_event(event_path)
    except (OSError, ValidationError) as e:
        _fail(e, "Payload события")

    github = GitHubClient(settings.github_token, event.owner, event.repo, settings.github_api_url)
    try:
        agent = ReviewerAgent(settings, github)
        agent.run(event, dry_run=dry_run)
    except Exception as e:
        _fail(e, f"PR #{event.number} в {event.owner}/{event.repo}")


@app.command()
def review(
    pr: int = typer.Option(..., "--pr", "-p", help="Номер PR"),
    repo: str = typer.Option(..., "--repo", "-r", help="Репозиторий (owner/repo)"),
    token: str | None = typer.Option(None, "--token", "-t", help="GitHub токен"),
    model: str | None = typer.Option(None, "--model", "-m", help="Модель LLM"),
    exclude: str | None = typer.Option(None, "--exclude", help="Glob-маски через запятую"),
    max_comments: int | None = typer.Option(None, "--max-comments", help="Лимит замечаний"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Не публиковать ревью"),
):
    """Проверить PR локально по полному diff."""
    owner, sep, name = repo.partition("/")
    if not sep or not owner or not name:
        err_console.print(f"[red]Ожидается owner/repo, получено: {repo}[/red]")
        raise typer.Exit(1)

    settings = _load_settings(
        github_token=token,
        openai_api_model=model,
        exclude=exclude,
        max_comments_per_pr=max_comments,
    )

    github = GitHubClient(settings.github_token, owner, name, settings.github_api_url)
    try:
        agent = ReviewerAgent(settings, github)
        agent.review(pr, dry_run=dry_run)
    except Exception as e:
        _fail(e, f"PR #{pr} в {repo}")


if __name__ == "__main__":
    app()
