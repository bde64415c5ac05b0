"""Per-user demo payload served by the protected endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

USER_NUMBER_MODULUS = 1000


@dataclass(frozen=True)
class ProtectedData:
    """
    Derived record; regenerated on every call and never stored.

    Two records for the same user differ only in ``timestamp``.
    """

    user_id: str
    message: str
    timestamp: str
    user_number: int

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict (camelCase keys)."""
        return {
            "userId": self.user_id,
            "message": self.message,
            "timestamp": self.timestamp,
            "userNumber": self.user_number,
        }


def user_number_for(user_id: str) -> int:
    """Sum of the code points of ``user_id``, modulo 1000. ``"abc"`` -> 294."""
    return sum(ord(ch) for ch in user_id) % USER_NUMBER_MODULUS


def isoformat_utc(moment: datetime) -> str:
    # 2024-01-01T00:00:00.000Z, same shape a browser's Date.toISOString() gives
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_user_data(user_id: str, now: datetime | None = None) -> ProtectedData:
    """Build the protected payload for ``user_id``; ``now`` defaults to the current UTC time."""
    moment = now if now is not None else datetime.now(timezone.utc)
    return ProtectedData(
        user_id=user_id,
        message=f"Hello, user {user_id}!",
        timestamp=isoformat_utc(moment),
        user_number=user_number_for(user_id),
    )
