# Client-side helpers: transcript and relay HTTP client.

from .transcript import Transcript, TranscriptMessage
from .relay_client import LiteratureBot, RelayClient, RelayClientError

__all__ = ["Transcript", "TranscriptMessage", "LiteratureBot", "RelayClient", "RelayClientError"]
