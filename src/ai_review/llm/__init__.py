from ai_review.llm.client import LLMClient
from ai_review.llm.schemas import ReviewReply, Suggestion

__all__ = ["LLMClient", "ReviewReply", "Suggestion"]
