from __future__ import annotations
import os


# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 10000


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ('0', 'false', 'no', 'off')


def get_log_level() -> str:
    raw = os.environ.get('NLI_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else _DEFAULT_LOG_LEVEL


def get_recursion_limit() -> int:
    raw = os.environ.get('NLI_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 100)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT


def get_color_enabled() -> bool:
    return flag_from_env('NLI_COLOR', False)
