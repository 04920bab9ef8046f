"""Stores known answers (a profile) used to pre-fill or skip questions."""
from __future__ import annotations

import json
from typing import Any, Dict, Iterator, Mapping, Optional


class Profile:
    """Key-to-value store of previously known answers.

    Values may be strings, booleans, or the ``"__prompt"`` sentinel that
    forces a hidden question to surface.  A profile sits *beneath* the
    per-call seed: when both carry a key, the seed wins.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._store: Dict[str, Any] = {}
        for name, value in (values or {}).items():
            self.remember(name, value)

    def remember(self, name: str, value: Any) -> None:
        """Store *value* under question *name*."""
        self._store[name.strip()] = value

    def recall(self, name: str) -> Optional[Any]:
        """Return the stored value for *name*, or ``None`` if not found."""
        return self._store.get(name.strip())

    def merged_with(self, seed: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Return a new dict of the profile overlaid by *seed* (seed keys win)."""
        merged = dict(self._store)
        merged.update(seed or {})
        return merged

    @classmethod
    def from_file(cls, path: str) -> "Profile":
        """Load a profile from a JSON object file.

        Raises:
            ValueError: If the file does not contain a JSON object.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object of known answers")
        return cls(data)

    # Read-only mapping protocol so a Profile can stand in for a plain dict.

    def keys(self):
        return self._store.keys()

    def __getitem__(self, name: str) -> Any:
        return self._store[name.strip()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._store)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:  # pragma: no cover
        return f"Profile({len(self)} entries)"
