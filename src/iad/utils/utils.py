# iad/utils/utils.py
"""
iad.utils.utils
===============

Core utility functions for the IAD submission tools.

Key functionalities include:
- Configuration loading: a hardcoded, built-in default configuration is
  recursively merged with the user's `~/.config/iad/config.toml` (or the file
  named by `$IAD_CONFIG`). A missing or broken user file never prevents the
  tools from running.
- Encoding-aware file reading for submission documents, using `chardet` to
  guess the encoding of files written by other tools.
- System clipboard access through `pyperclip`, degrading gracefully when no
  clipboard utility is available.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import chardet
import pyperclip
import toml


logger = logging.getLogger("iad")

CONFIG_ENV = "IAD_CONFIG"
CHARDET_SAMPLE_SIZE = 20 * 1024
CHARDET_MIN_CONFIDENCE = 0.75

# Direct representation of the default `config.toml`; the ultimate fallback.
DEFAULT_CONFIG: Dict[str, Any] = {
    "fields": {"insert_separator": True},
    "names": {"default_given": 1},
    "help": {"guide_base_url": "https://contribute.imdb.com/updates/guide"},
    "routing": {"domain": "imdb.com"},
    "templates": {
        "header": "{keyword}",
        "include_syntax": True,
        "include_example": False,
        "records": 1,
        "comment_prefix": "# ",
    },
    "colors": {
        "default": "default",
        "keyword": "bold_blue",
        "comment": "grey",
        "tag": "magenta",
        "separator": "yellow",
        "link": "green",
        "year": "cyan",
        "numeral": "bold_cyan",
        "attribute": "blue",
    },
    "editor": {"use_system_clipboard": True, "encoding": "utf-8"},
    "logging": {
        "log_file": "iad.log",
        "file_level": "INFO",
        "console_level": "WARNING",
        "log_to_console": True,
        "separate_error_log": False,
    },
}


def user_config_path() -> Path:
    """Returns the path of the user configuration file."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "iad" / "config.toml"


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges the `override` dictionary into the `base` dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Loads the default configuration merged with the user's configuration file.

    Args:
        path: Explicit configuration file; defaults to `user_config_path()`.

    Returns:
        The merged configuration. Parse errors are logged and the defaults
        are used for everything the file would have set.
    """
    final_config = copy.deepcopy(DEFAULT_CONFIG)
    logger.debug("Loaded embedded default configuration.")

    config_path = Path(path).expanduser() if path else user_config_path()
    if config_path.is_file():
        try:
            user_config = toml.load(config_path)
            final_config = deep_merge(final_config, user_config)
            logger.info(f"Successfully loaded and merged user config from {config_path}")
        except (toml.TomlDecodeError, OSError) as e:
            logger.error(f"Could not parse user config '{config_path}': {e}. Using defaults.")
    else:
        logger.debug(f"No user config at {config_path}; using defaults.")

    return final_config


def read_text_file(path: Union[str, Path], default_encoding: str = "utf-8") -> tuple[str, str]:
    """
    Reads a text file, guessing its encoding.

    The encodings tried, in order: the `chardet` guess when its confidence
    is at least 0.75, `default_encoding`, then latin-1 (which never fails).

    Returns:
        A `(content, encoding_used)` pair.

    Raises:
        OSError: The file cannot be read.
    """
    raw = Path(path).read_bytes()
    if not raw:
        return "", default_encoding

    guess = chardet.detect(raw[:CHARDET_SAMPLE_SIZE])
    encoding_guess = guess.get("encoding")
    confidence = guess.get("confidence") or 0.0
    logger.debug(f"Chardet detected encoding '{encoding_guess}' with confidence {confidence:.2f} for '{path}'.")

    candidates = []
    if encoding_guess and confidence >= CHARDET_MIN_CONFIDENCE:
        candidates.append(encoding_guess)
    for fallback in (default_encoding, "latin-1"):
        if fallback not in candidates:
            candidates.append(fallback)

    for encoding in candidates:
        try:
            return raw.decode(encoding), encoding
        except (UnicodeDecodeError, LookupError):
            logger.debug(f"Decoding '{path}' as {encoding} failed, trying next candidate.")
    # latin-1 maps every byte, so this is only reached with a broken candidate list.
    return raw.decode(default_encoding, errors="replace"), default_encoding


def copy_to_clipboard(text: str, config: Optional[Dict[str, Any]] = None) -> bool:
    """
    Copies `text` to the system clipboard.

    Returns:
        True on success; False when clipboard use is disabled by
        `editor.use_system_clipboard` or no clipboard utility is available.
    """
    if not (config or {}).get("editor", {}).get("use_system_clipboard", True):
        logger.debug("System clipboard usage is disabled by configuration.")
        return False
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning(
            f"System clipboard unavailable via pyperclip: {e}. "
            f"Ensure clipboard utilities (e.g., xclip, xsel, wl-copy, pbcopy) are installed."
        )
        return False
    return True
