"""Prompt-tree walker and Graphviz DOT exporter.

Walks every question reachable from a question list, including all nested
branches whether or not an answer would select them, and serialises the result
to Graphviz DOT: sibling questions are chained with plain edges and each tree
branch hangs off its parent question with an edge labelled by its branch key.
Optional SVG/PNG rendering requires the ``graphviz`` Python package and the
Graphviz system binaries.

Install optional rendering support::

    pip install 'prompt-tree[render]'
    # and the system graphviz package (e.g. apt-get install graphviz)
"""

from __future__ import annotations

import os
import re
import textwrap
from typing import Iterator, List, Optional, Sequence, Tuple

from .question import QuestionSpec


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _sanitize_id(s: str) -> str:
    s = re.sub(r"[^a-zA-Z0-9_]+", "_", s.strip())
    s = re.sub(r"_+", "_", s).strip("_")
    return s or "node"


def _wrap_label(s: str, width: int = 36) -> str:
    """Wrap *s* at *width* characters, inserting newlines for DOT labels."""
    return "\n".join(textwrap.wrap(s, width=width)) if s else ""


def _escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', r"\"")


# ---------------------------------------------------------------------------
# Walker
# ---------------------------------------------------------------------------


def iter_questions(
    questions: Sequence[QuestionSpec],
) -> Iterator[Tuple[int, Optional[str], QuestionSpec]]:
    """Yield ``(depth, branch_key, question)`` for every reachable question.

    The walk is depth first in asking order: a question's branches are
    visited (in their declared key order) before its next sibling.
    ``branch_key`` is ``None`` for top-level questions.
    """

    def _walk(seq: Sequence[QuestionSpec], depth: int, key: Optional[str]):
        for question in seq:
            yield depth, key, question
            for branch_key, branch in question.tree.items():
                yield from _walk(branch, depth + 1, branch_key)

    yield from _walk(questions, 0, None)


# ---------------------------------------------------------------------------
# DOT export + optional render
# ---------------------------------------------------------------------------


def to_dot(
    questions: Sequence[QuestionSpec],
    *,
    graph_name: str = "PromptTree",
    rankdir: str = "TB",
    node_shape: str = "box",
    fontname: str = "Helvetica",
) -> str:
    """Serialise *questions* and all of their branches to Graphviz DOT format.

    The returned string can be saved to a ``.dot`` file and rendered with any
    DOT-compatible viewer, or passed to :func:`render_dot`.

    Args:
        questions: Top-level question list.
        graph_name: Name embedded in the DOT ``digraph`` declaration.
        rankdir: Graph layout direction (``"TB"``, ``"LR"``, etc.).
        node_shape: Graphviz node shape attribute.
        fontname: Font used for nodes and edges.

    Returns:
        A DOT-format string.
    """
    lines: List[str] = []
    lines.append(f"digraph {_sanitize_id(graph_name)} {{")
    lines.append(f"  rankdir={rankdir};")
    lines.append(f'  node [shape={node_shape}, fontname="{fontname}"];')
    lines.append(f'  edge [fontname="{fontname}"];')

    counter = 0

    def _emit(seq: Sequence[QuestionSpec], parent: Optional[str], key: Optional[str]) -> None:
        nonlocal counter
        previous: Optional[str] = None
        for question in seq:
            node_id = f"q{counter}"
            counter += 1

            text = question.name
            if question.message:
                text = f"{text}: {question.message}"
            if question.profile:
                text = f"{text} [{question.profile}]"
            lines.append(f'  {node_id} [label="{_escape(_wrap_label(text))}"];')

            if previous is None and parent is not None:
                edge_label = _escape(_wrap_label(key or "", width=12))
                lines.append(f'  {parent} -> {node_id} [label="{edge_label}"];')
            elif previous is not None:
                lines.append(f"  {previous} -> {node_id} [style=dashed];")
            previous = node_id

            for branch_key, branch in question.tree.items():
                _emit(branch, node_id, branch_key)

    _emit(questions, None, None)
    lines.append("}")
    return "\n".join(lines)


def render_dot(dot: str, out_path: str, *, fmt: Optional[str] = None) -> str:
    """Render a DOT string to an image with Graphviz.

    The image format follows the extension of *out_path* (``tree.svg``,
    ``tree.png``) unless *fmt* is given; with neither, SVG is written.  The
    intermediate DOT source is removed after rendering.

    Args:
        dot: DOT-format string (e.g. from :func:`to_dot`).
        out_path: Image path, with or without an extension.
        fmt: Explicit Graphviz output format.

    Returns:
        The path of the rendered image.

    Raises:
        RuntimeError: If the ``graphviz`` package (the ``render`` extra) is
            not installed.
    """
    try:
        from graphviz import Source  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "Rendering needs the 'graphviz' package: pip install 'prompt-tree[render]'"
        ) from exc

    stem, ext = os.path.splitext(out_path)
    fmt = fmt or ext.lstrip(".") or "svg"
    return Source(dot).render(filename=stem, format=fmt, cleanup=True)
