"""ParamStore: the current Sets of a process, replaced by reload-and-swap."""

from __future__ import annotations

import logging
from pathlib import Path

from paramstyle.codec.json_codec import load, save
from paramstyle.model.params import Sets

logger = logging.getLogger(__name__)


class ParamStore:
    """Holds one Sets value.

    Readers take :attr:`sets` once per apply or diff pass and use that
    snapshot.  :meth:`load` clears the held value before reading, so a
    failed load leaves an empty Sets rather than partial state.  Writers
    are expected to serialize their calls.
    """

    def __init__(self, sets: Sets | None = None) -> None:
        self._sets = sets if sets is not None else Sets()

    @property
    def sets(self) -> Sets:
        return self._sets

    def swap(self, sets: Sets) -> Sets:
        """Replace the held Sets, returning the previous value."""
        previous = self._sets
        self._sets = sets
        return previous

    def load(self, filename: str | Path) -> Sets:
        self._sets = Sets()
        self._sets = load(filename, Sets)
        logger.debug("Store now holds %d set(s)", len(self._sets))
        return self._sets

    def save(self, filename: str | Path, indent: int = 2) -> None:
        save(self._sets, filename, indent=indent)
