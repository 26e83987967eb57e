import uuid


def new_id() -> str:
    """Return a random (version 4) UUID string for users, sessions and tasks."""
    return str(uuid.uuid4())
