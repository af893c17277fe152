import re

from unidiff import PatchSet

from ai_review.models import ChangedLine, FileDiff, Hunk

DEV_NULL = "/dev/null"


def _strip_prefix(path: str | None) -> str | None:
    if not path or path == DEV_NULL:
        return None
    return re.sub(r"^[ab]/", "", path)


def _header(hunk) -> str:
    header = (
        f"@@ -{hunk.source_start},{hunk.source_length} "
        f"+{hunk.target_start},{hunk.target_length} @@"
    )
    if hunk.section_header:
        header += f" {hunk.section_header}"
    return header


def _convert_line(line) -> ChangedLine | None:
    content = line.value.rstrip("\n")
    if line.is_added:
        return ChangedLine(f"+{content}", "add", new_line=line.target_line_no)
    if line.is_removed:
        return ChangedLine(f"-{content}", "remove", old_line=line.source_line_no)
    if line.is_context:
        return ChangedLine(
            f" {content}", "context",
            new_line=line.target_line_no, old_line=line.source_line_no,
        )
    # "\ No newline at end of file"
    return None


def parse_diff(diff_text: str) -> list[FileDiff]:
    """Разобрать unified diff в список FileDiff в порядке следования файлов."""
    if not diff_text or not diff_text.strip():
        return []

    files = []
    for pfile in PatchSet(diff_text):
        hunks = []
        for hunk in pfile:
            changes = tuple(c for c in map(_convert_line, hunk) if c is not None)
            hunks.append(Hunk(header=_header(hunk), changes=changes))

        files.append(FileDiff(
            path=None if pfile.is_removed_file else _strip_prefix(pfile.target_file),
            hunks=tuple(hunks),
            is_deleted=pfile.is_removed_file,
        ))

    return files
