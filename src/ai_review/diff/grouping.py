from ai_review.models import FileDiff, ReviewUnit

MAX_CHANGES_PER_CHUNK = 100
MIN_CHANGES_PER_CHUNK = 3
WHOLE_FILE_MAX_HUNKS = 3


def group_hunks(
    file: FileDiff,
    max_changes: int = MAX_CHANGES_PER_CHUNK,
    min_changes: int = MIN_CHANGES_PER_CHUNK,
    whole_file_max_hunks: int = WHOLE_FILE_MAX_HUNKS,
) -> list[ReviewUnit]:
    """Сгруппировать hunks файла в единицы ревью.

    Файл с небольшим числом hunks уходит одной единицей целиком. Иначе hunks
    обходятся слева направо: мелкие пропускаются, слишком большие идут
    отдельно как есть, остальные склеиваются с соседним, если суммарно
    укладываются в max_changes.
    """
    hunks = file.hunks
    if not hunks:
        return []

    if len(hunks) <= whole_file_max_hunks:
        return [ReviewUnit.from_hunks(*hunks)]

    units = []
    i = 0
    while i < len(hunks):
        hunk = hunks[i]
        size = len(hunk.changes)

        if size < min_changes:
            i += 1
            continue

        if size <= max_changes and i + 1 < len(hunks):
            next_size = len(hunks[i + 1].changes)
            # мелкий сосед не склеивается, он будет пропущен на своём шаге
            if next_size >= min_changes and size + next_size <= max_changes:
                units.append(ReviewUnit.from_hunks(hunk, hunks[i + 1]))
                i += 2
                continue

        units.append(ReviewUnit.from_hunks(hunk))
        i += 1

    return units
