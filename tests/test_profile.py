"""Tests for prompt_tree.Profile."""
import json

import pytest

from prompt_tree.profile import Profile


def test_remember_and_recall():
    profile = Profile()
    profile.remember("sass", True)
    assert profile.recall("sass") is True


def test_recall_missing_returns_none():
    assert Profile().recall("nonexistent") is None


def test_strips_whitespace_on_names():
    profile = Profile()
    profile.remember("  author  ", "Ada")
    assert profile.recall("author") == "Ada"
    assert profile.recall("  author  ") == "Ada"


def test_values_are_not_coerced():
    profile = Profile({"sass": False, "name": " spaced "})
    assert profile.recall("sass") is False
    assert profile.recall("name") == " spaced "


def test_overwrite_existing_value():
    profile = Profile()
    profile.remember("license", "MIT")
    profile.remember("license", "ISC")
    assert profile.recall("license") == "ISC"
    assert len(profile) == 1


def test_lookups_strip_names_like_recall():
    profile = Profile({"sass": True})
    assert " sass " in profile
    assert profile[" sass "] is True
    assert profile.recall(" sass ") is True
    assert 3 not in profile


def test_merged_with_seed_wins():
    profile = Profile({"sass": False, "license": "MIT"})
    merged = profile.merged_with({"sass": True})
    assert merged == {"sass": True, "license": "MIT"}
    # the profile itself is untouched
    assert profile.recall("sass") is False


def test_behaves_like_a_mapping():
    profile = Profile({"a": 1, "b": 2})
    assert dict(profile) == {"a": 1, "b": 2}
    assert "a" in profile
    assert "z" not in profile
    assert profile["b"] == 2
    assert sorted(profile) == ["a", "b"]


def test_from_file(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps({"sass": True, "author": "Ada"}))
    profile = Profile.from_file(str(path))
    assert profile.merged_with() == {"sass": True, "author": "Ada"}


def test_from_file_rejects_non_object(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(["sass"]))
    with pytest.raises(ValueError, match="expected a JSON object"):
        Profile.from_file(str(path))
