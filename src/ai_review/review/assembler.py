from rich.console import Console

from ai_review.llm.schemas import Suggestion
from ai_review.models import InlineComment

console = Console()

MIN_COMMENT_LENGTH = 20


def parse_line_number(value) -> int | None:
    """Положительный целый номер строки или None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if not isinstance(value, int):
        return None
    return value if value > 0 else None


def assemble_comments(
    path: str | None,
    suggestions: tuple[Suggestion, ...] | list[Suggestion],
    min_length: int = MIN_COMMENT_LENGTH,
) -> list[InlineComment]:
    if not path:
        return []

    comments = []
    for s in suggestions:
        line = parse_line_number(s.line_number)
        if line is None:
            console.print(f"[yellow]Пропускаю замечание с некорректной строкой: {s.line_number!r}[/yellow]")
            continue

        body = s.review_comment or ""
        if len(body) < min_length:
            console.print(f"[yellow]Пропускаю слишком короткое замечание: {body!r}[/yellow]")
            continue

        comments.append(InlineComment(path=path, line=line, body=body))

    return comments


def cap_comments(comments: list[InlineComment], limit: int) -> list[InlineComment]:
    return comments[:max(limit, 0)]
