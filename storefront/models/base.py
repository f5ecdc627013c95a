import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return str(uuid.uuid4())


# Python-side timestamps keep sub-second precision on every backend,
# order history sorts on them.
def utcnow() -> datetime:
    return datetime.now(timezone.utc)
