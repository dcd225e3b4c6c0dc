"""Message identifier generation.

Hides how message ids are made unique. Ids are UUIDv7 values: a
millisecond timestamp prefix followed by random bits, so they sort by
creation time and do not need a registry or collision check.
"""

from uuid_extensions import uuid7

MESSAGE_ID_PREFIX = "msg_"


def generate_id() -> str:
    """Generate a new message identifier.

    Returns:
        Opaque id string such as ``msg_0192b7c4e1f07a3c9d2e4b6f8a1c3e5d``
    """
    return f"{MESSAGE_ID_PREFIX}{uuid7().hex}"
