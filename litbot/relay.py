"""The chat relay: one user message in, one assistant reply out.

The relay is built once from ``Settings`` and keeps no per-request state, so a
single instance serves concurrent requests.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from litbot.errors import MissingMessageError, ServiceUnavailableError
from litbot.generate import ChatGenerator, EchoDevClient, GatewayClient
from litbot.schemas import ChatReply, ChatRequest
from litbot.settings import Settings

logger = logging.getLogger(__name__)


class ChatRelay:
    def __init__(self, generator: Optional[ChatGenerator]):
        # None means the upstream credential is missing
        self.generator = generator

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatRelay":
        if settings.USE_ECHO:
            logger.warning("relay_echo_mode enabled; replies are not generated by a model")
            return cls(ChatGenerator(model_client=EchoDevClient()))
        if not settings.has_gateway_key:
            logger.error("relay_missing_credential AI_GATEWAY_API_KEY not set; chat requests will fail")
            return cls(None)
        client = GatewayClient(
            api_key=settings.AI_GATEWAY_API_KEY,
            url=settings.AI_GATEWAY_URL,
            model=settings.AI_MODEL,
            timeout=settings.UPSTREAM_TIMEOUT_SEC,
        )
        return cls(ChatGenerator(model_client=client))

    @property
    def available(self) -> bool:
        return self.generator is not None

    @staticmethod
    def parse_request(payload: Any) -> ChatRequest:
        """Validate a decoded JSON body. Anything without a non-empty text
        ``message`` is rejected before any upstream I/O."""
        if not isinstance(payload, dict):
            raise MissingMessageError(f"body type={type(payload).__name__}")
        try:
            return ChatRequest.model_validate(payload)
        except ValidationError as e:
            raise MissingMessageError(str(e)) from e

    def reply(self, req: ChatRequest) -> ChatReply:
        if self.generator is None:
            logger.error("relay_unavailable AI_GATEWAY_API_KEY not set")
            raise ServiceUnavailableError("missing gateway credential")
        out = self.generator.chat(req.message)
        logger.info("relay_reply model=%s chars=%d", out.meta.get("model"), len(out.text))
        return ChatReply(response=out.text)
