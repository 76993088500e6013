"""Single-shot LLM review of a pull request's latest commit."""

__version__ = "0.1.0"
