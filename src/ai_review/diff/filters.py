from fnmatch import fnmatch

from ai_review.models import FileDiff


def is_excluded(path: str, patterns: list[str]) -> bool:
    """Совпадение по полному пути или по имени файла.

    Префикс "**/" также допускает файлы в корне репозитория.
    """
    name = path.rsplit("/", 1)[-1]
    for pattern in patterns:
        candidates = [pattern]
        if pattern.startswith("**/"):
            candidates.append(pattern[3:])
        if any(fnmatch(path, p) or fnmatch(name, p) for p in candidates):
            return True
    return False


def filter_files(files: list[FileDiff], patterns: list[str]) -> list[FileDiff]:
    """Убрать удалённые файлы и файлы, попадающие под exclude-маски."""
    return [
        f for f in files
        if not f.is_deleted and f.path and not is_excluded(f.path, patterns)
    ]
