# utils/timezone.py
"""
Política de timezone do serviço.

REGRAS:
1. Timestamps gerados pelo serviço são sempre UTC (timezone-aware)
2. Serialização JSON: ISO 8601 com timezone explícito

USO:
    from utils.timezone import now_utc, to_iso

    exported_at = to_iso(now_utc())
"""

from datetime import datetime, timezone
from typing import Optional

UTC = timezone.utc


def now_utc() -> datetime:
    """Retorna o datetime atual em UTC (timezone-aware)."""
    return datetime.now(UTC)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Serializa datetime em ISO 8601.

    Datetimes naive são tratados como UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.isoformat()
