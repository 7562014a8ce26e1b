# HTTP client for the chat relay, plus the chat loop a UI drives.

from __future__ import annotations

import logging
from typing import Optional

import requests

from .transcript import Transcript

logger = logging.getLogger(__name__)


class RelayClientError(Exception):
    """Relay answered with an error or could not be reached."""

    def __init__(self, status_code: Optional[int], error: str):
        self.status_code = status_code
        self.error = error
        super().__init__(f"{status_code}: {error}" if status_code else error)


class RelayClient:
    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}/ai"

    def ask(self, message: str) -> str:
        try:
            resp = self.session.post(self.url, json={"message": message}, timeout=self.timeout)
        except requests.RequestException as e:
            raise RelayClientError(None, str(e)) from e

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if resp.status_code != 200:
            raise RelayClientError(resp.status_code, data.get("error") or resp.reason or "request failed")
        reply = data.get("response")
        if not isinstance(reply, str) or not reply:
            raise RelayClientError(resp.status_code, "No response from AI")
        return reply


class LiteratureBot:
    """One reader's conversation with the companion.

    ``send`` appends the user's turn, asks the relay, and appends the reply.
    A failed turn appends no bot message; the error is re-raised so the UI
    can show it and let the reader resend.
    """

    def __init__(self, client: RelayClient, transcript: Optional[Transcript] = None):
        self.client = client
        self.transcript = transcript if transcript is not None else Transcript()
        self.loading = False

    def send(self, text: str) -> Optional[str]:
        text = (text or "").strip()
        if not text or self.loading:
            return None

        self.transcript.add_user(text)
        self.loading = True
        try:
            reply = self.client.ask(text)
        except RelayClientError as e:
            logger.error("literature_bot_error status=%s error=%s", e.status_code, e.error)
            raise
        finally:
            self.loading = False

        self.transcript.add_bot(reply)
        return reply
