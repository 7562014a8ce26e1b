# ChatGenerator wraps a model client with the literature companion persona:
# one system message from config.yaml, one user message, one reply.

from __future__ import annotations
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml

from .types import Message, ChatResponse, ModelParams

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")


@lru_cache(maxsize=4)
def load_config(config_path: str = str(DEFAULT_CONFIG_PATH)) -> dict:
    if not os.path.exists(config_path):
        logger.warning("generator_config_missing path=%s", config_path)
        return {}
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class ChatGenerator:
    def __init__(self, model_client, config_path: Optional[str] = None):
        self.model_client = model_client
        self.config_path = config_path or str(DEFAULT_CONFIG_PATH)
        self.cfg = load_config(self.config_path)

    @property
    def system_prompt(self) -> str:
        return (self.cfg.get("system_prompt") or "").strip()

    def _compose_messages(self, user_message: str) -> list[Message]:
        """System persona first, then the single user turn. No history."""
        return [
            Message(role="system", content=self.system_prompt),
            Message(role="user", content=user_message),
        ]

    def chat(self, user_message: str) -> ChatResponse:
        messages = self._compose_messages(user_message)
        params = ModelParams(
            temperature=self.cfg.get("temperature"),
            max_tokens=self.cfg.get("max_tokens"),
        )
        response_text, meta = self.model_client.generate(messages, params)
        return ChatResponse(text=response_text, meta=meta)
