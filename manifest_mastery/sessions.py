"""In-memory store of wizard sessions."""

import logging
import secrets
import string
from typing import Optional

from .errors import SessionNotFoundError
from .wizard.controller import WizardController

logger = logging.getLogger(__name__)


class SessionStore:
    """Keeps wizard sessions for the lifetime of the process. Nothing is saved."""

    def __init__(
        self,
        sequence: str = "full",
        max_goals: int = 3,
        auto_generate: bool = True,
        max_upload_bytes: Optional[int] = None,
        max_sessions: Optional[int] = None,
    ):
        """
        Initialize an empty store with the options new sessions are built with.

        Args:
            max_sessions: Most sessions kept at once; the oldest is evicted
                when a new one would exceed it. None means no limit.
        """
        if max_sessions is not None and max_sessions < 1:
            raise ValueError(f"max_sessions must be at least 1, got {max_sessions}")
        self.max_sessions = max_sessions
        self.sequence = sequence
        self.max_goals = max_goals
        self.auto_generate = auto_generate
        self.max_upload_bytes = max_upload_bytes
        self._sessions: dict[str, WizardController] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> tuple[str, WizardController]:
        """Start a new session, evicting the oldest ones if the store is full."""
        if self.max_sessions is not None:
            while len(self._sessions) >= self.max_sessions:
                oldest = next(iter(self._sessions))
                del self._sessions[oldest]
                logger.info(f"Evicted oldest session: {oldest}")

        session_id = generate_session_id()
        while session_id in self._sessions:
            session_id = generate_session_id()

        wizard = WizardController(
            sequence=self.sequence,
            max_goals=self.max_goals,
            auto_generate=self.auto_generate,
            max_upload_bytes=self.max_upload_bytes,
        )
        self._sessions[session_id] = wizard
        logger.info(f"Created session: {session_id}")
        return session_id, wizard

    def get(self, session_id: str) -> WizardController:
        """
        Get session by id.

        Raises:
            SessionNotFoundError: If no such session exists
        """
        wizard = self._sessions.get(session_id)
        if wizard is None:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        return wizard

    def delete(self, session_id: str):
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        logger.info(f"Discarded session: {session_id}")


def generate_session_id() -> str:
    """Generate a random session id."""
    return "".join(
        secrets.choice(string.ascii_letters + string.digits) for _ in range(32)
    )
