"""Prompt resolver – asks a question list and walks any prompt trees it selects.

:class:`PromptResolver` resolves an ordered sequence of
:class:`~prompt_tree.question.QuestionSpec` one question at a time:

* Profile policies decide per question whether to ask, pre-fill the default
  from known data, or answer silently from it.
* After each answer, the canonical string form of the value selects an
  optional nested sequence from the question's ``tree``; that branch is fully
  resolved (depth first) before the next sibling is asked.
* All answers, from the top-level list and every branch taken, accumulate in a
  single flat dict which also starts out holding the merged profile and seed.

The caller's question list is never mutated, and question specs are never
modified: a pre-filled default is handed to the asker as a copy.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, Mapping, Optional, Union

from .profile import Profile
from .question import PROMPT_SENTINEL, ProfilePolicy, QuestionSpec

logger = logging.getLogger(__name__)


# Any single-question primitive: takes a question, returns (or resolves to) a
# mapping holding at least the answer for ``question.name``.
AnswerRecord = Mapping[str, Any]
AskFn = Callable[[QuestionSpec], Union[AnswerRecord, Awaitable[AnswerRecord]]]


class PromptResolver:
    """Resolves branching question lists against known profile data.

    Args:
        profile: Known answers (a :class:`~prompt_tree.profile.Profile` or any
            mapping) merged beneath the seed of every :meth:`resolve` call.
        ask: Default single-question primitive.  Defaults to a
            :class:`~prompt_tree.console.ConsoleAsker`.  May be a coroutine
            function or a plain callable returning the answer mapping.
    """

    def __init__(
        self,
        profile: Optional[Mapping[str, Any]] = None,
        ask: Optional[AskFn] = None,
    ) -> None:
        self.profile: Profile = profile if isinstance(profile, Profile) else Profile(profile)
        self._ask: Optional[AskFn] = ask

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _default_ask(self) -> AskFn:
        if self._ask is None:
            from .console import ConsoleAsker

            self._ask = ConsoleAsker()
        return self._ask

    def _effective_ask(self, question: QuestionSpec, known: Mapping[str, Any], ask: AskFn) -> AskFn:
        """Pick the asking behaviour for *question* given the *known* values."""
        policy = question.policy
        value = known.get(question.name)

        if policy is ProfilePolicy.DEFAULT and value is not None:
            prefilled = dataclasses.replace(question, default=value)
            logger.debug("%s: asking with profile default %r", question.name, value)
            return lambda _q: ask(prefilled)

        if policy is ProfilePolicy.OVERRIDE and value is not None:
            logger.debug("%s: answered from profile (override)", question.name)
            return lambda q: {q.name: value}

        if policy is ProfilePolicy.HIDDEN and value != PROMPT_SENTINEL:
            logger.debug("%s: answered from profile (hidden)", question.name)
            return lambda q: {q.name: value}

        return ask

    async def _resolve_sequence(
        self,
        questions: Iterable[QuestionSpec],
        answers: Dict[str, Any],
        ask: AskFn,
    ) -> int:
        """Resolve *questions* into *answers*; return how many were resolved."""
        pending = tuple(questions)
        cursor = 0
        resolved = 0
        while cursor < len(pending):
            question = pending[cursor]
            cursor += 1
            resolved += 1

            record = self._effective_ask(question, answers, ask)(question)
            if inspect.isawaitable(record):
                record = await record
            answers.update(record)

            # Only the question's own answer selects a branch.
            if question.name not in record:
                continue
            branch = question.branch(record[question.name])
            if branch:
                logger.debug(
                    "%s: entering branch %r (%d question(s))",
                    question.name,
                    record[question.name],
                    len(branch),
                )
                resolved += await self._resolve_sequence(branch, answers, ask)
        return resolved

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def resolve(
        self,
        questions: Iterable[QuestionSpec],
        seed: Optional[Mapping[str, Any]] = None,
        ask: Optional[AskFn] = None,
    ) -> Dict[str, Any]:
        """Ask *questions* in order and return the flat answer dict.

        The result starts as the profile overlaid by *seed* (seed keys win)
        and accumulates every answer given or synthesised, including those
        from nested tree branches.  Questions in branches that were not
        selected contribute nothing.

        Args:
            questions: Ordered question specs (any iterable).  Not modified.
            seed: Known answers for this call, taking precedence over the
                profile.  Not modified.
            ask: Single-question primitive for this call and all of its
                nested branches.  Defaults to the resolver's asker.

        Returns:
            A new dict mapping question names to answers.

        Raises:
            Exception: Whatever the asker raises, unchanged.
        """
        answers = self.profile.merged_with(seed)
        resolved = await self._resolve_sequence(questions, answers, ask or self._default_ask())
        logger.debug("Resolved %d question(s) into %d answer(s)", resolved, len(answers))
        return answers


async def resolve(
    questions: Iterable[QuestionSpec],
    seed: Optional[Mapping[str, Any]] = None,
    ask: Optional[AskFn] = None,
    profile: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Resolve *questions* with a one-off :class:`PromptResolver`."""
    return await PromptResolver(profile=profile, ask=ask).resolve(questions, seed)
