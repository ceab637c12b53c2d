from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware current UTC time for defaults and update stamps."""
    return datetime.now(timezone.utc)
