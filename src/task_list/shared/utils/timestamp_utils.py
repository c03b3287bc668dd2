"""
Epoch-millisecond timestamp helpers.

Timestamps are stored as epoch milliseconds (int) and converted to
ISO-8601 strings only at the API boundary.
"""

import time
from datetime import datetime, timezone
from typing import Optional


def now_epoch_ms() -> int:
    """Current UTC time in epoch milliseconds."""
    return int(time.time() * 1000)


def epoch_ms_to_iso8601(epoch_ms: Optional[int]) -> Optional[str]:
    """Convert epoch milliseconds to an ISO-8601 string in UTC."""
    if epoch_ms is None:
        return None
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).isoformat()
