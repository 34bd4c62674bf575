"""CSRF tokens stored in the user's session."""

import hmac
import logging
import secrets
import string
from collections.abc import MutableMapping

logger = logging.getLogger(__name__)

_ALPHABET = string.ascii_letters + string.digits
_TOKEN_LENGTH = 30


def gen_csrf_token() -> str:
    """Generate a random 30-character alphanumeric token."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(_TOKEN_LENGTH))


def set_csrf(session: MutableMapping) -> str:
    """Store a fresh token in ``session`` and return it."""
    token = gen_csrf_token()
    logger.debug("set_csrf token=%s", token)
    session.setdefault("login", None)
    session["csrf_token"] = token
    return token


def validate_csrf(session: MutableMapping, form_token) -> bool:
    """Check ``form_token`` against the session's token.

    A matching token is consumed so it cannot be used twice.
    """
    if form_token is None:
        logger.debug("_csrf token missing from form")
        return False
    stored = session.get("csrf_token")
    if stored is not None and hmac.compare_digest(str(stored), str(form_token)):
        session["csrf_token"] = None
        return True
    logger.debug("CSRF validation failed")
    return False