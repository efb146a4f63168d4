from __future__ import annotations
import os


_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def letrec_enabled() -> bool:
    # letrec is defined but not part of the core bundle unless asked for
    return flag_from_env('SKIM_ENABLE_LETREC', False)


def display_enabled() -> bool:
    return flag_from_env('SKIM_ENABLE_DISPLAY', True)
