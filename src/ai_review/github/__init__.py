from ai_review.github.client import GitHubClient
from ai_review.github.event import PullRequestEvent, load_event

__all__ = ["GitHubClient", "PullRequestEvent", "load_event"]
