"""Unique slot tokens for temporary substitution inside message text.

Expansion swaps placeholders and plural blocks out of a message before
editing it, then swaps them back. Each swapped-out fragment is represented
by a slot token that cannot occur in ordinary message content.

Thread Safety:
    The counter is process-wide and guarded by a lock, so concurrent
    expansions never receive the same token.

Python 3.13+.
"""

from __future__ import annotations

import itertools
import threading

__all__ = ["next_slot_token"]

# ESC delimits both ends: tokens never match the placeholder or plural
# patterns, and no token is a prefix of another.
_SLOT_DELIMITER = "\x1b"

_counter = itertools.count()
_counter_lock = threading.Lock()


def next_slot_token() -> str:
    """Return a fresh, collision-free slot token.

    Tokens look like ``"\\x1bflatplural:17\\x1b"``.
    """
    with _counter_lock:
        n = next(_counter)
    return f"{_SLOT_DELIMITER}flatplural:{n}{_SLOT_DELIMITER}"
