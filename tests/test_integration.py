"""Integration tests – verify all prompt_tree components work together."""
from __future__ import annotations

import json

import pytest

# ---------------------------------------------------------------------------
# Public API import smoke test
# ---------------------------------------------------------------------------

_PUBLIC = {
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
}


def test_public_api_all_symbols_importable():
    """Every symbol listed in __all__ must be importable from the top-level package."""
    import prompt_tree as pt

    for name in _PUBLIC:
        assert hasattr(pt, name), f"Missing public symbol: {name}"


def test_public_api_all_matches_expected():
    import prompt_tree as pt

    assert set(pt.__all__) == _PUBLIC


# ---------------------------------------------------------------------------
# Files -> resolver -> answers
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_files_profile_and_console_end_to_end(tmp_path):
    from prompt_tree import ConsoleAsker, Profile, PromptResolver, load_questions

    questions_path = tmp_path / "questions.json"
    questions_path.write_text(
        json.dumps(
            [
                {"name": "name", "message": "Project name?", "default": "app"},
                {"name": "author", "profile": "override"},
                {
                    "name": "sass",
                    "type": "confirm",
                    "message": "Use Sass?",
                    "default": True,
                    "profile": "default",
                    "tree": {
                        "false": [
                            {"name": "autoprefixer", "type": "confirm", "default": True}
                        ]
                    },
                },
                {"name": "license", "profile": "hidden"},
            ]
        )
    )
    profile_path = tmp_path / "profile.json"
    profile_path.write_text(json.dumps({"author": "Ada", "sass": False, "license": "MIT"}))

    typed = iter(["my-app", "", "n"])
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(typed)

    resolver = PromptResolver(
        profile=Profile.from_file(str(profile_path)),
        ask=ConsoleAsker(input_fn=fake_input),
    )
    answers = await resolver.resolve(load_questions(str(questions_path)))

    assert answers == {
        "name": "my-app",
        "author": "Ada",
        "sass": False,
        "autoprefixer": False,
        "license": "MIT",
    }
    # sass was asked with the profile value pre-filled as its default
    assert prompts[1].startswith("Use Sass? (y/N)")
