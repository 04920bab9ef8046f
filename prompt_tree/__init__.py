"""prompt_tree – ask branching question lists, seeded from a profile."""

from .console import ConsoleAsker
from .profile import Profile
from .question import (
    PROMPT_SENTINEL,
    ProfilePolicy,
    QuestionSpec,
    load_questions,
    parse_questions,
    tree_key,
)
from .resolver import AskFn, PromptResolver, resolve
from .tree import iter_questions, render_dot, to_dot

__all__ = [
    "AskFn",
    "ConsoleAsker",
    "PROMPT_SENTINEL",
    "Profile",
    "ProfilePolicy",
    "PromptResolver",
    "QuestionSpec",
    "iter_questions",
    "load_questions",
    "parse_questions",
    "render_dot",
    "resolve",
    "to_dot",
    "tree_key",
]
