import itertools
import logging
import re
from typing import Iterable, Optional, Set

from .clock import SessionClock

logger = logging.getLogger(__name__)

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def slug(text: str) -> str:
    """Lower-case `text` and collapse every non-alphanumeric run into '-'."""
    return _SLUG_STRIP.sub("-", text.lower().strip()).strip("-")


def to_base36(value: int) -> str:
    if value == 0:
        return "0"

    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])

    return "".join(reversed(digits))


def short_hash(text: str) -> str:
    """
    31-multiplier string hash folded to signed 32 bits,
    rendered in base 36 and cut to six characters.
    """
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF

    if h >= 0x80000000:
        h -= 0x100000000

    return to_base36(abs(h))[:6]


class IdGenerator:
    """
    Issues synthetic, human-readable node and evidence identifiers.

    Format
    ------
    ``{namespace}_{slug(name)}_{hash(name + when)}-{seq}``

    The hash mixes in the generation time so repeated names look
    distinct, and the base-36 sequence suffix makes every id issued by
    one generator unique by construction. Ids restored from an export
    are reserved so freshly issued ids never shadow them.
    """

    def __init__(self, clock: Optional[SessionClock] = None) -> None:
        self._clock = clock or SessionClock()
        self._counter = itertools.count(1)
        self._issued: Set[str] = set()

    def make_id(self, namespace: str, name: str, when: Optional[int] = None) -> str:
        label = name or namespace.upper()
        stamp = self._clock.now() if when is None else when

        while True:
            seq = next(self._counter)
            candidate = (
                f"{namespace}_{slug(label)}_"
                f"{short_hash(label + str(stamp))}-{to_base36(seq)}"
            )
            if candidate not in self._issued:
                break

        self._issued.add(candidate)
        logger.debug("[IDS] Issued %s", candidate)
        return candidate

    def reserve(self, ids: Iterable[str]) -> None:
        """Mark externally created ids as taken."""
        self._issued.update(ids)

    def __contains__(self, candidate: str) -> bool:
        return candidate in self._issued
