# Offline stand-in for the gateway (USE_ECHO=1): the companion restates the
# reader's question instead of answering it.

from typing import Any, Dict, List, Tuple

from ..types import Message, ModelParams

OFFLINE_TAG = "[offline literature companion]"


class EchoDevClient:
    model = "echo-dev"

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        question = next((m.content for m in reversed(messages) if m.role == "user"), "").strip()
        if not question:
            return f"{OFFLINE_TAG} What would you like to talk about?", {"engine": "echo", "model": self.model}
        return f"{OFFLINE_TAG} You asked: {question}", {"engine": "echo", "model": self.model}
