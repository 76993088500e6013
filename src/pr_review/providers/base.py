# src/pr_review/providers/base.py
from abc import ABC, abstractmethod


class LLMProvider(ABC):
    @abstractmethod
    async def review(self, diff: str) -> str:
        """Send the diff to the LLM and return the raw text of its reply."""
        pass
