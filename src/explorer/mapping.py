from __future__ import annotations

from typing import Dict, Iterator, Mapping, Optional

from core.models import RepositoryMapping


class MappingTable:
    # Insertion-ordered normalized key -> RepositoryMapping; grows, never shrinks.

    def __init__(self, seed: Optional[Mapping[str, RepositoryMapping]] = None) -> None:
        # RepositoryMapping is frozen, so copying the outer dict fully detaches the seed
        self._entries: Dict[str, RepositoryMapping] = dict(seed or {})

    def get(self, key: str) -> Optional[RepositoryMapping]:
        return self._entries.get(key)

    def set(self, key: str, mapping: RepositoryMapping) -> None:
        self._entries[key] = mapping

    def snapshot(self) -> Dict[str, RepositoryMapping]:
        return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
