"""Identity gate: every operation starts here."""

from config.exceptions import UnauthorizedError
from actions.context import UserIdentity


def require_user(context) -> UserIdentity:
    """Return the caller carried by ``context`` or raise ``UnauthorizedError``."""
    user = getattr(context, "user", None)
    if user is None or not user.id:
        raise UnauthorizedError()
    return user
