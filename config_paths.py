import json
import logging
import os

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "sheetview")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
READ_ONLY_DEFAULT = True
COLUMN_SELECT_DEFAULT = False
DEFAULT_ALIGNMENT_DEFAULT = "start"
ROW_JUMP_PERCENT_DEFAULT = 0.05
COL_JUMP_PERCENT_DEFAULT = 0.20

_ALIGNMENTS = {"start", "center", "end"}


def default_config():
    return {
        "READ_ONLY": READ_ONLY_DEFAULT,
        "COLUMN_SELECT": COLUMN_SELECT_DEFAULT,
        "DEFAULT_ALIGNMENT": DEFAULT_ALIGNMENT_DEFAULT,
        "ROW_JUMP_PERCENT": ROW_JUMP_PERCENT_DEFAULT,
        "COL_JUMP_PERCENT": COL_JUMP_PERCENT_DEFAULT,
    }


def _percent(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value > 1:
        return None
    return float(value)


def _flag(value):
    return value if isinstance(value, bool) else None


def _alignment(value):
    if isinstance(value, str) and value.strip().lower() in _ALIGNMENTS:
        return value.strip().lower()
    return None


_CHECKS = {
    "READ_ONLY": _flag,
    "COLUMN_SELECT": _flag,
    "DEFAULT_ALIGNMENT": _alignment,
    "ROW_JUMP_PERCENT": _percent,
    "COL_JUMP_PERCENT": _percent,
}


def merge_config(overrides, cfg=None):
    """Apply upper-case ``overrides`` on top of ``cfg`` (defaults if omitted).

    Unknown keys and values of the wrong type or range are dropped, so the
    result holds the same shapes ``default_config`` does.
    """
    cfg = default_config() if cfg is None else dict(cfg)
    if not isinstance(overrides, dict):
        return cfg
    for name, value in overrides.items():
        check = _CHECKS.get(name)
        checked = check(value) if check is not None else None
        if checked is None:
            logger.warning("Ignoring config override %s=%r", name, value)
            continue
        cfg[name] = checked
    return cfg


def load_config():
    cfg = default_config()

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    view = data.get("view")
    if not isinstance(view, dict):
        view = data

    for name, check in (
        ("READ_ONLY", _flag),
        ("COLUMN_SELECT", _flag),
        ("DEFAULT_ALIGNMENT", _alignment),
    ):
        value = check(view.get(name.lower()))
        if value is not None:
            cfg[name] = value

    jumps = view.get("jump_percent")
    if isinstance(jumps, dict):
        rows = _percent(jumps.get("rows"))
        if rows is not None:
            cfg["ROW_JUMP_PERCENT"] = rows
        cols = _percent(jumps.get("cols"))
        if cols is not None:
            cfg["COL_JUMP_PERCENT"] = cols

    return cfg
