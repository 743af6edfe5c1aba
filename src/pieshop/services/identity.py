"""Cart identity resolution.

The request layer calls :func:`resolve_cart_id` once per request and
threads the returned id into every cart operation. The cart engine never
touches session state itself.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping

from pieshop.domain.ids import generate_cart_id, validate_cart_id

CART_SESSION_KEY = "CartId"

logger = logging.getLogger(__name__)


def resolve_cart_id(session: MutableMapping[str, str], *, key: str = CART_SESSION_KEY) -> str:
    """Return the session's cart id, minting and storing one on first contact.

    An existing value is returned unchanged, so repeated calls within one
    session always yield the same id. A value this module did not mint is
    still trusted; it is only noted in the debug log.
    """
    cart_id = session.get(key)
    if cart_id is not None:
        if not validate_cart_id(cart_id):
            logger.debug("Session %r holds a cart id not minted here: %r", key, cart_id)
        return cart_id

    cart_id = generate_cart_id()
    session[key] = cart_id
    logger.debug("Minted cart id %s", cart_id)
    return cart_id


def forget_cart_id(session: MutableMapping[str, str], *, key: str = CART_SESSION_KEY) -> str | None:
    """Drop the cart id from the session; the next resolve mints a new one.

    Returns the id that was forgotten, if any. Cart lines are left in the
    store untouched.
    """
    return session.pop(key, None)
