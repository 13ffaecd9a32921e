from __future__ import annotations
import os

MODES = ("interpret", "tokenize", "parse")

# Defaults
_DEFAULT_MAX_TOKEN_LENGTH = 300
_DEFAULT_MODE = "interpret"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_max_token_length() -> int:
    """Longest literal (number, string body, symbol) the tokenizer accepts."""
    return int_from_env('SPRIG_MAX_TOKEN_LENGTH', _DEFAULT_MAX_TOKEN_LENGTH)


def get_mode() -> str:
    mode = os.environ.get('SPRIG_MODE', '').strip().lower() or _DEFAULT_MODE
    if mode not in MODES:
        raise ValueError(f"SPRIG_MODE must be one of {', '.join(MODES)}, got {mode!r}")
    return mode


def trace_enabled() -> bool:
    return bool(os.environ.get('SPRIG_TRACE'))
