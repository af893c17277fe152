from ai_review.diff.filters import filter_files, is_excluded
from ai_review.diff.grouping import group_hunks
from ai_review.diff.parser import parse_diff

__all__ = ["parse_diff", "filter_files", "is_excluded", "group_hunks"]
