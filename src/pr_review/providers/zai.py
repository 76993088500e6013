# src/pr_review/providers/zai.py
import json
import logging
from typing import Any
import httpx
from .base import LLMProvider
from pr_review.config import Settings
from pr_review.errors import ConfigError, UpstreamError
from pr_review.review.prompts import build_review_messages


logger = logging.getLogger(__name__)

REASONING_SEPARATOR = "\n\n---\n\n"


def _response_structure(data: Any) -> str:
    """Shape of a response without any of its values, for error messages."""
    choices = data.get("choices") if isinstance(data, dict) else None
    first = choices[0] if isinstance(choices, list) and choices else None
    message = first.get("message") if isinstance(first, dict) else None
    structure = {
        "hasChoices": bool(choices),
        "choicesLen": len(choices) if isinstance(choices, list) else 0,
        "firstChoice": {
            "hasMessage": bool(message),
            "messageKeys": list(message.keys()) if isinstance(message, dict) else [],
        } if first is not None else None,
    }
    return json.dumps(structure, indent=2)


def _stripped(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def extract_model_text(data: dict[str, Any]) -> str:
    """Pull the model's answer out of a chat-completions response.

    Thinking models may answer in ``content``, ``reasoning_content`` or both.
    When both are present the reasoning comes first.
    """
    choices = data.get("choices") or []
    first = choices[0] if isinstance(choices, list) and choices else {}
    message = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message, dict):
        message = {}

    content = _stripped(message.get("content"))
    reasoning = _stripped(message.get("reasoning_content"))

    if content:
        return f"{reasoning}{REASONING_SEPARATOR}{content}" if reasoning else content
    if reasoning:
        return reasoning

    raise UpstreamError(
        f"No review content in Z.AI response. Response structure: {_response_structure(data)}"
    )


class ZaiProvider(LLMProvider):
    TEMPERATURE = 0.3
    MAX_TOKENS = 4000

    def __init__(self, settings: Settings):
        self.api_key = settings.z_ai_api_key
        self.api_url = settings.z_ai_api_url
        self.model = settings.z_ai_model

    def _payload(self, diff: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": build_review_messages(diff),
            "temperature": self.TEMPERATURE,
            "max_tokens": self.MAX_TOKENS,
            "stream": False,
        }

    async def review(self, diff: str) -> str:
        if not self.api_key:
            raise ConfigError(
                "Z_AI_API_KEY secret is not set. "
                "Add it in repo Settings > Secrets and variables > Actions."
            )

        async with httpx.AsyncClient() as client:
            response = await client.post(
                self.api_url,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json=self._payload(diff),
                timeout=None,
            )

        if response.is_error:
            raise UpstreamError(f"Z.AI API error {response.status_code}: {response.text}")

        try:
            data = response.json()
        except json.JSONDecodeError as e:
            raise UpstreamError(f"Z.AI API returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise UpstreamError(f"Z.AI API returned unexpected payload type: {type(data).__name__}")

        if data.get("error"):
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else error
            raise UpstreamError(f"Z.AI API error: {message}")
        if data.get("code") and data["code"] != 200:
            raise UpstreamError(f"Z.AI API error: {data.get('message') or 'Unknown error'}")

        text = extract_model_text(data)
        logger.info(f"Z.AI response length: {len(text)} chars")
        return text
