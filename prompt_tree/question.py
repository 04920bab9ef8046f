"""Question definitions for branching prompt trees.

A :class:`QuestionSpec` is a yeoman-style question definition with two extra
pieces of metadata:

* ``profile`` – how a known value from a profile affects the question
  (see :class:`ProfilePolicy`).
* ``tree`` – nested question sequences keyed by the canonical string form of
  the answer (see :func:`tree_key`).

For instance, to ask about Autoprefixer only when the user declines Sass::

    QuestionSpec.from_dict({
        "type": "confirm",
        "name": "sass",
        "message": "Use Sass?",
        "default": True,
        "tree": {
            "false": [{
                "type": "confirm",
                "name": "autoprefixer",
                "message": "Use Autoprefixer?",
                "default": True,
            }]
        },
    })
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple


#: Seed value that forces a ``hidden`` question to be asked interactively.
PROMPT_SENTINEL = "__prompt"

_KNOWN_FIELDS = ("name", "message", "type", "default", "choices", "profile", "tree")


class ProfilePolicy(str, Enum):
    """How a profile value affects a single question."""

    DEFAULT = "default"
    OVERRIDE = "override"
    HIDDEN = "hidden"


def tree_key(value: Any) -> Optional[str]:
    """Return the canonical branch key for an answer *value*.

    Booleans become ``"true"``/``"false"``, integral floats drop their
    fraction, sequences are joined with ``","`` and strings are kept as-is.
    ``None`` has no key, so no branch can be selected by it.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(tree_key(v) or "" for v in value)
    return str(value)


@dataclass(frozen=True)
class QuestionSpec:
    """A single named question, optionally carrying a profile policy and a tree."""

    name: str
    message: str = ""
    type: str = "input"
    default: Any = None
    choices: Tuple[Any, ...] = ()
    profile: Optional[str] = None
    # branch key -> nested questions asked only when the answer matches
    tree: Mapping[str, Tuple["QuestionSpec", ...]] = field(default_factory=dict)
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def policy(self) -> Optional[ProfilePolicy]:
        """The :class:`ProfilePolicy` for ``profile``, or ``None`` if unknown."""
        try:
            return ProfilePolicy(self.profile) if self.profile is not None else None
        except ValueError:
            return None

    def branch(self, value: Any) -> Optional[Tuple["QuestionSpec", ...]]:
        """Return the nested questions selected by answer *value*, if any."""
        key = tree_key(value)
        if key is None:
            return None
        return self.tree.get(key)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QuestionSpec":
        """Build a spec (and its nested tree) from a yeoman-style mapping.

        Keys other than the known question fields are kept in ``extra``.

        Raises:
            ValueError: If ``name`` is missing or ``tree`` is not a mapping of
                question lists.
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError(f"Question is missing a name: {dict(data)!r}")

        raw_tree = data.get("tree") or {}
        if not isinstance(raw_tree, Mapping):
            raise ValueError(f"Question {name!r}: tree must be a mapping")
        tree: Dict[str, Tuple[QuestionSpec, ...]] = {}
        for key, branch in raw_tree.items():
            if not isinstance(branch, (list, tuple)):
                raise ValueError(
                    f"Question {name!r}: tree branch {key!r} must be a list of questions"
                )
            tree[str(key)] = tuple(cls.from_dict(q) for q in branch)

        return cls(
            name=name,
            message=data.get("message", ""),
            type=data.get("type", "input"),
            default=data.get("default"),
            choices=tuple(data.get("choices") or ()),
            profile=data.get("profile"),
            tree=tree,
            extra={k: v for k, v in data.items() if k not in _KNOWN_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialise back to a plain dict (JSON-serialisable for plain values)."""
        out: Dict[str, Any] = dict(self.extra)
        out.update(name=self.name, message=self.message, type=self.type)
        if self.default is not None:
            out["default"] = self.default
        if self.choices:
            out["choices"] = list(self.choices)
        if self.profile is not None:
            out["profile"] = self.profile
        if self.tree:
            out["tree"] = {k: [q.to_dict() for q in v] for k, v in self.tree.items()}
        return out


def parse_questions(items: Sequence[Mapping[str, Any]]) -> List[QuestionSpec]:
    """Build a list of :class:`QuestionSpec` from a sequence of dicts."""
    return [QuestionSpec.from_dict(item) for item in items]


def load_questions(path: str) -> List[QuestionSpec]:
    """Load a JSON list of question dicts from *path*.

    Raises:
        ValueError: If the file does not contain a JSON list, or a question is
            malformed.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of questions")
    return parse_questions(data)
