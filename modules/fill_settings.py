# modules/fill_settings.py

import os
from typing import Any, Optional

try:
    import streamlit as st
except Exception:  # running outside Streamlit
    st = None

SECTION = "smart_fill"

MAX_ROWS_KEY = "SMART_FILL_MAX_ROWS"
SEED_ROWS_KEY = "SMART_FILL_SEED_ROWS"

DEFAULT_MAX_ROWS = 5000
DEFAULT_SEED_ROWS = 2


def _get_secret(key: str) -> Optional[Any]:
    """
    Safely read a key from st.secrets if Streamlit is present; otherwise None.
    """
    if st is None:
        return None
    try:
        return st.secrets[key]
    except Exception:
        return None


def _get_nested_secret(section: str, key: str) -> Optional[Any]:
    """
    Safely read a nested key like st.secrets["smart_fill"]["max_rows"].
    """
    if st is None:
        return None
    try:
        section_dict = st.secrets.get(section, None)
        if hasattr(section_dict, "get"):
            return section_dict.get(key)
    except Exception:
        pass
    return None


def _resolve(key: str) -> Optional[Any]:
    """
    Resolution order:
    1) st.secrets["smart_fill"]["max_rows"]     (section, short lowercase name)
    2) st.secrets["SMART_FILL_MAX_ROWS"]        (flat, uppercase)
    3) os.environ["SMART_FILL_MAX_ROWS"]        (env var)
    """
    short = key[len("SMART_FILL_"):].lower()
    value = _get_nested_secret(SECTION, short)
    if value is not None:
        return value

    value = _get_secret(key)
    if value is not None:
        return value

    return os.getenv(key)


def _as_int(key: str, raw: Any) -> int:
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def max_fill_rows() -> int:
    """Longest row range a single fill may cover."""
    raw = _resolve(MAX_ROWS_KEY)
    if raw is None or str(raw).strip() == "":
        return DEFAULT_MAX_ROWS
    value = _as_int(MAX_ROWS_KEY, raw)
    if value < 1:
        raise ValueError(f"{MAX_ROWS_KEY} must be positive, got {value}")
    return value


def default_seed_rows() -> int:
    """How many leading cells of a range seed the prediction (1 or 2)."""
    raw = _resolve(SEED_ROWS_KEY)
    if raw is None or str(raw).strip() == "":
        return DEFAULT_SEED_ROWS
    value = _as_int(SEED_ROWS_KEY, raw)
    if value not in (1, 2):
        raise ValueError(f"{SEED_ROWS_KEY} must be 1 or 2, got {value}")
    return value
