from rich.console import Console

from ai_review.config import Settings
from ai_review.diff import filter_files, group_hunks, parse_diff
from ai_review.github import GitHubClient, PullRequestEvent
from ai_review.llm import LLMClient
from ai_review.models import FileDiff, InlineComment, PRContext
from ai_review.review import assemble_comments, cap_comments, request_review
from ai_review.review.requester import Completer

console = Console()


def analyze_files(
    files: list[FileDiff],
    pr: PRContext,
    settings: Settings,
    complete: Completer,
) -> list[InlineComment]:
    """Прогнать все файлы через группировку, модель и сборку замечаний.

    Единицы обрабатываются строго по очереди. Неудачный запрос для одной
    единицы даёт ноль замечаний и не прерывает остальные.
    """
    comments = []
    for file in files:
        units = group_hunks(
            file,
            max_changes=settings.max_changes_per_chunk,
            min_changes=settings.min_changes_per_chunk,
            whole_file_max_hunks=settings.whole_file_max_hunks,
        )
        if not units:
            console.print(f"[dim]{file.path}: нечего ревьюить[/dim]")
            continue

        console.print(f"[blue]Анализирую {file.path} ({len(units)} частей)...[/blue]")
        for unit in units:
            attempt = request_review(
                file.path, unit, pr, complete,
                max_changes=settings.max_changes_per_chunk,
            )
            if not attempt.ok:
                continue
            comments.extend(
                assemble_comments(file.path, attempt.suggestions, settings.min_comment_length)
            )

    return cap_comments(comments, settings.max_comments_per_pr)


class ReviewerAgent:
    def __init__(
        self,
        settings: Settings,
        github: GitHubClient,
        llm: LLMClient | None = None,
    ):
        self.settings = settings
        self.github = github
        self.llm = llm or LLMClient(settings)

    def run(self, event: PullRequestEvent, dry_run: bool = False) -> list[InlineComment]:
        """Ревью по событию из GitHub Actions."""
        console.print(f"Pull request event type: {event.action}")
        if event.is_synchronize:
            return self.review(event.number, base=event.before, head=event.after, dry_run=dry_run)
        return self.review(event.number, dry_run=dry_run)

    def review(
        self,
        pr_number: int,
        base: str | None = None,
        head: str | None = None,
        dry_run: bool = False,
    ) -> list[InlineComment]:
        """Проверить PR и оставить inline-замечания. Возвращает опубликованные замечания."""

        # 1. Получаем PR
        console.print(f"[blue]Читаю PR #{pr_number}...[/blue]")
        pr = self.github.get_pr_context(pr_number)

        # 2. Получаем diff: при synchronize только новые коммиты
        if base and head:
            console.print(f"[blue]Получаю diff {base[:7]}...{head[:7]}...[/blue]")
            diff = self.github.compare_diff(base, head)
        else:
            console.print("[blue]Получаю diff...[/blue]")
            diff = self.github.get_pr_diff(pr_number)

        if not diff:
            console.print("[yellow]No diff found[/yellow]")
            return []

        # 3. Разбираем и фильтруем файлы
        files = filter_files(parse_diff(diff), self.settings.exclude_patterns)
        console.print(f"[dim]Файлов к ревью: {len(files)}[/dim]")

        # 4. Генерируем замечания
        comments = analyze_files(files, pr, self.settings, self.llm.complete)

        if not comments:
            console.print("[green]Замечаний нет[/green]")
            return []

        # 5. Публикуем ревью
        if dry_run:
            for c in comments:
                console.print(f"[bold]{c.path}:{c.line}[/bold]\n{c.body}\n")
            console.print(f"[yellow]Dry run: {len(comments)} замечаний не опубликованы[/yellow]")
            return comments

        console.print(f"[blue]Публикую ревью ({len(comments)} замечаний)...[/blue]")
        self.github.create_review(pr_number, comments)
        console.print("[green]Готово![/green]")
        return comments
