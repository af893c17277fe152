from dataclasses import dataclass
from typing import Callable

from pydantic import ValidationError
from rich.console import Console

from ai_review.llm.prompts import LARGE_CHUNK_NOTE, REVIEW_PROMPT
from ai_review.llm.schemas import ReviewReply, Suggestion
from ai_review.models import PRContext, ReviewUnit

console = Console(stderr=True)

Completer = Callable[[str], str]


@dataclass(frozen=True)
class ReviewAttempt:
    """Результат запроса ревью для одной единицы: замечания либо ошибка."""

    suggestions: tuple[Suggestion, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_changes(unit: ReviewUnit) -> str:
    lines = []
    for change in unit.changes:
        number = change.line_number
        lines.append(f"{number if number else ''} {change.content}")
    return "\n".join(lines)


def build_prompt(
    path: str, unit: ReviewUnit, pr: PRContext, max_changes: int | None = None
) -> str:
    size_note = ""
    if max_changes is not None and len(unit.changes) > max_changes:
        size_note = LARGE_CHUNK_NOTE

    return REVIEW_PROMPT.format(
        size_note=size_note,
        path=path,
        title=pr.title,
        description=pr.description,
        content=unit.content,
        changes=format_changes(unit),
    )


def parse_reply(text: str) -> tuple[Suggestion, ...]:
    """Разобрать ответ модели. Падает только на некорректном верхнем уровне."""
    reply = ReviewReply.model_validate_json(text)

    suggestions = []
    for item in reply.reviews:
        try:
            suggestions.append(Suggestion.model_validate(item))
        except ValidationError:
            console.print(f"[yellow]Пропускаю некорректное замечание: {item!r}[/yellow]")
    return tuple(suggestions)


def request_review(
    path: str,
    unit: ReviewUnit,
    pr: PRContext,
    complete: Completer,
    max_changes: int | None = None,
) -> ReviewAttempt:
    """Запросить ревью одной единицы. Ошибки не пробрасываются наружу."""
    prompt = build_prompt(path, unit, pr, max_changes)
    try:
        text = complete(prompt)
        return ReviewAttempt(suggestions=parse_reply(text))
    except ValidationError as e:
        console.print(f"[red]Некорректный ответ модели для {path}: {e.error_count()} ошибок[/red]")
        return ReviewAttempt(error=str(e))
    except Exception as e:
        console.print(f"[red]Ошибка запроса к модели для {path}: {e}[/red]")
        return ReviewAttempt(error=str(e))
