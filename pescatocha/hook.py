"""Hooks that keep catalogues of the fish they have caught."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class HookKind(IntEnum):
    """Weight class of a hook, numbered as the rod selects them."""

    LIGHT = 1
    MEDIUM = 2
    HEAVY = 3


class Hook:
    """A hook holding one catalogue of caught fish ids per kind.

    A hook of a given kind records catches only in the catalogue of its
    own kind; its other catalogues stay empty. A hook without a kind
    records nothing.
    """

    def __init__(self, kind: Optional[HookKind] = None, bait_power: int = 0) -> None:
        self.kind = HookKind(kind) if kind is not None else None
        self.bait_power = bait_power
        self._catalogs: dict[HookKind, list[int]] = {k: [] for k in HookKind}

    def catch(self, fish_id: int) -> None:
        """Record a caught fish id, once, in this hook's own catalogue."""
        if self.kind is None:
            return
        entries = self._catalogs[self.kind]
        if fish_id not in entries:
            entries.append(fish_id)

    def catalog(self, kind: HookKind | int) -> tuple[int, ...]:
        """Fish ids in the catalogue of ``kind``, in the order caught.

        Raises ValueError for a number that names no hook kind.
        """
        return tuple(self._catalogs[HookKind(kind)])

    def __repr__(self) -> str:
        return f"Hook(kind={self.kind!r}, bait_power={self.bait_power!r})"