# Client for an OpenAI-compatible chat-completions gateway.
# One POST per call, explicit timeout, no retries.

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from litbot.errors import EmptyResponseError, RateLimitError, UpstreamError
from ..types import Message, ModelParams

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 30.0


class GatewayClient:
    def __init__(self, api_key: str, url: str, model: str, timeout: float = DEFAULT_TIMEOUT_SEC):
        self.api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        if params.temperature is not None:
            payload["temperature"] = float(params.temperature)
        if params.max_tokens is not None:
            payload["max_tokens"] = int(params.max_tokens)

        resp = requests.post(
            self.url,
            json=payload,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
        )

        if not resp.ok:
            logger.error("gateway_error status=%s body=%s", resp.status_code, resp.text)
            if resp.status_code == 429:
                raise RateLimitError(f"gateway status={resp.status_code}")
            raise UpstreamError(f"gateway status={resp.status_code}")

        data = resp.json()
        text = _first_choice_content(data)
        if not text:
            logger.error("gateway_empty_response data=%s", data)
            raise EmptyResponseError("choices[0].message.content missing")
        return text, {"engine": "gateway", "model": self.model}


def _first_choice_content(data: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` when it is a non-empty string."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, str) and content:
        return content
    return None
