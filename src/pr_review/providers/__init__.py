# src/pr_review/providers/__init__.py
from .base import LLMProvider
from .zai import ZaiProvider, extract_model_text

__all__ = ["LLMProvider", "ZaiProvider", "extract_model_text"]
