"""
Token Store - in-memory mapping from session id to the user's Google credential.

The session id is the Google account's stable subject id ('sub'), so signing
in again with the same account overwrites the previous record instead of
creating a second one.

Design follows the other in-memory services:
- Dict storage behind a small put/get/has/delete interface
- Singleton instance
- Expired records are dropped on access

Nothing is persisted: every session is lost when the process restarts.
A shared store (Redis, database) can replace this class without changing
its callers.

Usage:
    from calendar_backend.services.token_store import token_store, SessionRecord

    token_store.put("1234", SessionRecord(session_id="1234", access_token="ya29..."))
    record = token_store.get("1234")
"""

import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from calendar_backend.core.config import settings


logger = logging.getLogger("calendar_backend.services.token_store")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SessionRecord:
    """
    Cached credential plus minimal profile for one signed-in Google account.

    email and display_name are descriptive only, never used for authorization.
    """
    session_id: str
    access_token: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    expires_at: Optional[datetime] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if this record has outlived its TTL."""
        if self.expires_at is None:
            return False
        return (now or _utcnow()) >= self.expires_at


class TokenStore:
    """
    Process-wide session store.

    Writes replace the whole record (last write wins). A lock guards the
    dict so the store can also be used from threadpool-run handlers.

    Args:
        ttl_seconds: Lifetime of a record after it is written; None or 0 disables expiry
        clock: Returns the current time (UTC); overridable in tests
    """

    def __init__(
        self,
        ttl_seconds: Optional[int] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._records: Dict[str, SessionRecord] = {}
        self._lock = threading.Lock()
        self._ttl = timedelta(seconds=ttl_seconds) if ttl_seconds else None
        self._clock = clock

    # -------------------------------------------------------------------------
    # CORE OPERATIONS
    # -------------------------------------------------------------------------

    def put(self, session_id: str, record: SessionRecord) -> SessionRecord:
        """
        Insert or replace the record for session_id.

        The stored copy is stamped with created_at/expires_at.

        Returns:
            The record as stored
        """
        now = self._clock()
        stored = replace(
            record,
            session_id=session_id,
            created_at=now,
            expires_at=now + self._ttl if self._ttl else None,
        )

        with self._lock:
            replaced = session_id in self._records
            self._records[session_id] = stored

        logger.debug(
            f"{'Replaced' if replaced else 'Stored'} session record",
            extra={"session_id": session_id},
        )
        return stored

    def get(self, session_id: Optional[str]) -> Optional[SessionRecord]:
        """Return the live record for session_id, or None."""
        if not session_id:
            return None

        now = self._clock()
        with self._lock:
            record = self._records.get(session_id)
            if record is None:
                return None
            if record.is_expired(now):
                del self._records[session_id]
                logger.info("Session record expired", extra={"session_id": session_id})
                return None
            return record

    def has(self, session_id: Optional[str]) -> bool:
        """Check whether a live record exists for session_id."""
        return self.get(session_id) is not None

    def delete(self, session_id: Optional[str]) -> bool:
        """
        Remove the record for session_id.

        Returns:
            True if a record was removed
        """
        if not session_id:
            return False
        with self._lock:
            return self._records.pop(session_id, None) is not None

    # -------------------------------------------------------------------------
    # MAINTENANCE
    # -------------------------------------------------------------------------

    def purge_expired(self) -> int:
        """
        Drop every expired record.

        Returns:
            Number of records removed
        """
        now = self._clock()
        with self._lock:
            expired = [sid for sid, rec in self._records.items() if rec.is_expired(now)]
            for sid in expired:
                del self._records[sid]

        if expired:
            logger.info(f"Purged {len(expired)} expired session records")
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------

token_store = TokenStore(ttl_seconds=settings.SESSION_TTL_SECONDS)
