"""Console asker – the default single-question primitive, backed by ``input``."""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Optional

from .question import QuestionSpec

_YES = {"y", "yes", "true"}
_NO = {"n", "no", "false"}

# returned by _coerce when the line cannot be read as an answer
_RETRY = object()


def _format_prompt(question: QuestionSpec) -> str:
    lines = [question.message or question.name]
    if question.type in ("list", "rawlist") and question.choices:
        for i, choice in enumerate(question.choices, start=1):
            lines.append(f"  {i}) {choice}")
    if question.type == "confirm":
        hint = "Y/n" if question.default else "y/N"
        lines[0] = f"{lines[0]} ({hint})"
    elif question.default is not None:
        lines[0] = f"{lines[0]} ({question.default})"
    return "\n".join(lines) + "\n> "


def _coerce(question: QuestionSpec, raw: str) -> Any:
    """Turn the raw console line into an answer value for *question*."""
    text = raw.strip()
    if not text:
        return question.default
    if question.type == "confirm":
        lowered = text.lower()
        if lowered in _YES:
            return True
        if lowered in _NO:
            return False
        return _RETRY
    if question.type in ("list", "rawlist") and question.choices and text.isdigit():
        index = int(text) - 1
        if 0 <= index < len(question.choices):
            return question.choices[index]
    return text


class ConsoleAsker:
    """Asks one question on the console and returns ``{name: value}``.

    The blocking read runs on a worker thread so the event loop driving the
    resolver stays free.  An empty line keeps the question's default;
    ``confirm`` questions accept y/yes/true and n/no/false and ask again on
    anything else; ``list`` questions accept a 1-based choice number.

    Args:
        input_fn: Callable used to read a line.  Defaults to the built-in
            :func:`input`.
    """

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None) -> None:
        self._input_fn: Callable[[str], str] = input_fn if input_fn is not None else input

    async def __call__(self, question: QuestionSpec) -> Dict[str, Any]:
        prompt = _format_prompt(question)
        while True:
            raw = await asyncio.to_thread(self._input_fn, prompt)
            value = _coerce(question, raw)
            if value is not _RETRY:
                return {question.name: value}
            prompt = "Please answer y or n.\n> "
