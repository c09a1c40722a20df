# SPDX-License-Identifier: AGPL-3.0-only
from __future__ import annotations

from typing import Iterable


class WarnedCache:
    """Memo of attribute names that already produced a diagnostic.

    Keys are the names exactly as authored. Entries are never evicted; the
    cache only shrinks through ``clear()``, which exists for test isolation.
    """

    def __init__(self) -> None:
        self._warned: dict[str, bool] = {}

    def is_warned(self, name: str) -> bool:
        return self._warned.get(name, False)

    def mark(self, name: str) -> None:
        self._warned[name] = True

    def mark_all(self, names: Iterable[str]) -> None:
        for name in names:
            self._warned[name] = True

    def clear(self) -> None:
        self._warned.clear()

    def snapshot(self) -> frozenset[str]:
        return frozenset(name for name, warned in self._warned.items() if warned)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_warned(name)

    def __len__(self) -> int:
        return len(self._warned)


__all__ = ["WarnedCache"]
