from ai_review.agents.reviewer import ReviewerAgent, analyze_files

__all__ = ["ReviewerAgent", "analyze_files"]
