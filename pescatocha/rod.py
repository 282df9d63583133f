"""The fishing rod: the selected hook and the extra reaction time."""

from __future__ import annotations

from pescatocha.hook import Hook, HookKind

_UPGRADE_STEP = 200


class Rod:
    """A rod carrying one hook of each kind, one of them in use.

    ``extra_time`` is added reaction time in milliseconds. ``current`` is
    the number last selected; selecting a number that names no hook kind
    records it but keeps the hook in use.
    """

    def __init__(self) -> None:
        self.extra_time = 0
        self.current = int(HookKind.LIGHT)
        self.hooks: dict[HookKind, Hook] = {kind: Hook(kind) for kind in HookKind}
        self._hook = self.hooks[HookKind.LIGHT]

    @property
    def hook(self) -> Hook:
        """The hook currently in use."""
        return self._hook

    def select(self, kind: HookKind | int) -> None:
        """Switch to the hook of ``kind``."""
        self.current = int(kind)
        try:
            self._hook = self.hooks[HookKind(kind)]
        except ValueError:
            pass

    def catch(self, fish_id: int) -> None:
        """Record a successful catch on the hook in use."""
        self._hook.catch(fish_id)

    def upgrade(self) -> None:
        """Lengthen the reaction time allowed."""
        self.extra_time += _UPGRADE_STEP

    def catalog_size(self, option: HookKind | int) -> int:
        """Number of entries in catalogue ``option`` of the hook in use."""
        return len(self._hook.catalog(option))

    def catalog_item(self, option: HookKind | int, index: int) -> int:
        """Entry ``index`` of catalogue ``option`` of the hook in use."""
        entries = self._hook.catalog(option)
        if not 0 <= index < len(entries):
            raise IndexError(f"catalogue index out of range: {index}")
        return entries[index]