# Typed dataclasses shared by the generator and its model clients.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """Optional sampling overrides. Unset values are not sent upstream."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass
class ChatResponse:
    text: str
    meta: Dict[str, Any] = field(default_factory=dict)
