# tests/test_utils.py
"""Unit tests for utility functions in the `iad.utils` module."""

from unittest.mock import patch

import pyperclip

from iad.utils import utils


def test_deep_merge() -> None:
    """Verify that `deep_merge` correctly merges nested dictionaries.

    This test ensures:
    - Existing values are preserved if not overridden.
    - Nested dictionaries are merged recursively.
    - Conflicting keys are overridden by values from the second dictionary.
    - The inputs are left unchanged.
    """
    base = {"a": 1, "b": {"x": 10, "y": 20}}
    override = {"b": {"y": 99, "z": 100}, "c": 3}
    result = utils.deep_merge(base, override)
    expected = {"a": 1, "b": {"x": 10, "y": 99, "z": 100}, "c": 3}
    assert result == expected
    assert base == {"a": 1, "b": {"x": 10, "y": 20}}


def test_load_config_defaults_without_user_file(isolated_user_config) -> None:
    """Without a user file the embedded defaults are returned."""
    assert not isolated_user_config.exists()
    config = utils.load_config()

    assert config == utils.DEFAULT_CONFIG
    assert config is not utils.DEFAULT_CONFIG


def test_load_config_merges_user_file(tmp_path) -> None:
    """User settings override defaults key by key."""
    path = tmp_path / "config.toml"
    path.write_text('[routing]\ndomain = "example.org"\n\n[templates]\nrecords = 3\n')

    config = utils.load_config(path)

    assert config["routing"]["domain"] == "example.org"
    assert config["templates"]["records"] == 3
    assert config["templates"]["comment_prefix"] == "# "
    assert utils.DEFAULT_CONFIG["routing"]["domain"] == "imdb.com"


def test_load_config_from_environment(isolated_user_config) -> None:
    """`$IAD_CONFIG` names the user file."""
    isolated_user_config.write_text('[names]\ndefault_given = 2\n')

    assert utils.user_config_path() == isolated_user_config
    assert utils.load_config()["names"]["default_given"] == 2


def test_load_config_broken_file_uses_defaults(tmp_path) -> None:
    """A user file that does not parse is reported and ignored."""
    path = tmp_path / "config.toml"
    path.write_text("[routing\ndomain = ")

    assert utils.load_config(path) == utils.DEFAULT_CONFIG


def test_read_text_file_utf8(tmp_path) -> None:
    """UTF-8 text is decoded as such."""
    path = tmp_path / "doc.iad"
    path.write_text("ACTOR\nGérard Depardieu|Cyrano de Bergerac (1990)||Cyrano\n", encoding="utf-8")

    content, encoding = utils.read_text_file(path)

    assert "Gérard" in content
    assert encoding.lower() == "utf-8"


def test_read_text_file_falls_back_when_guess_fails(tmp_path) -> None:
    """Bytes the detector cannot place still decode through the fallbacks."""
    path = tmp_path / "doc.iad"
    path.write_bytes(b"Caf\xe9")

    with patch("iad.utils.utils.chardet.detect", return_value={"encoding": None, "confidence": 0.0}):
        content, encoding = utils.read_text_file(path)

    assert content == "Café"
    assert encoding == "latin-1"


def test_read_text_file_empty(tmp_path) -> None:
    path = tmp_path / "empty.iad"
    path.write_bytes(b"")
    assert utils.read_text_file(path) == ("", "utf-8")


def test_copy_to_clipboard() -> None:
    """Clipboard success, unavailability and the configuration switch."""
    with patch("iad.utils.utils.pyperclip.copy") as copy:
        assert utils.copy_to_clipboard("ACTOR", {}) is True
        copy.assert_called_once_with("ACTOR")

    with patch("iad.utils.utils.pyperclip.copy", side_effect=pyperclip.PyperclipException("no clipboard")):
        assert utils.copy_to_clipboard("ACTOR") is False

    with patch("iad.utils.utils.pyperclip.copy") as copy:
        assert utils.copy_to_clipboard("ACTOR", {"editor": {"use_system_clipboard": False}}) is False
        copy.assert_not_called()
