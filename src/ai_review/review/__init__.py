from ai_review.review.assembler import assemble_comments, cap_comments, parse_line_number
from ai_review.review.requester import ReviewAttempt, build_prompt, request_review

__all__ = [
    "assemble_comments",
    "cap_comments",
    "parse_line_number",
    "ReviewAttempt",
    "build_prompt",
    "request_review",
]
