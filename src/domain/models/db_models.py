from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime, timezone


def utc_now():
    """Return current UTC datetime."""
    return datetime.now(timezone.utc)


class User(BaseModel):
    """
    A user account as stored in the ``user`` collection.

    Every field defaults to its empty value, so ``User()`` doubles as the
    result of a lookup that matched nothing.
    """
    model_config = ConfigDict(extra="ignore")

    first_name: str = ""
    last_name: str = ""
    email_address: str = ""
    password: str = ""  # write-only, cleared on every read
    created_at: Optional[datetime] = None
