from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, List, Literal, Optional

from litbot.generate import load_config

Sender = Literal["user", "bot"]


@dataclass
class TranscriptMessage:
    id: str
    content: str
    sender: Sender
    timestamp: datetime = field(default_factory=datetime.now)


class Transcript:
    """Ordered chat history as shown to the reader.

    Seeded with the companion's greeting. Only ever appended to, in call
    order; nothing here is sent back to the relay.
    """

    def __init__(self, greeting: Optional[str] = None):
        self._ids = itertools.count(1)
        self._messages: List[TranscriptMessage] = []
        if greeting is None:
            greeting = (load_config().get("greeting") or "").strip()
        if greeting:
            self._append(greeting, "bot")

    def _append(self, content: str, sender: Sender) -> TranscriptMessage:
        msg = TranscriptMessage(id=str(next(self._ids)), content=content, sender=sender)
        self._messages.append(msg)
        return msg

    def add_user(self, content: str) -> TranscriptMessage:
        return self._append(content, "user")

    def add_bot(self, content: str) -> TranscriptMessage:
        return self._append(content, "bot")

    @property
    def messages(self) -> List[TranscriptMessage]:
        return list(self._messages)

    def __iter__(self) -> Iterator[TranscriptMessage]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)
