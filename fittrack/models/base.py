import re
import secrets
from datetime import datetime, timezone
from typing import Any

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-f]{24}$")

def new_object_id() -> str:
    """Return a fresh 24-character hex identifier."""
    return secrets.token_hex(12)

def is_object_id(value: Any) -> bool:
    return isinstance(value, str) and OBJECT_ID_PATTERN.match(value) is not None

def utcnow() -> datetime:
    """Timezone-aware current UTC time for timestamp columns."""
    return datetime.now(timezone.utc)
