import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tablespy")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "tablespy.log")

# default settings
TABLE_HEIGHT_DEFAULT = 20
DELIMITER_DEFAULT = None
THEME_DEFAULT = {
    "border_color": 240,
    "header_color": 15,
    "highlight_fg": 229,
    "highlight_bg": 57,
}


def _is_color(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


def load_config():
    cfg = {
        "TABLE_HEIGHT": TABLE_HEIGHT_DEFAULT,
        "DELIMITER": DELIMITER_DEFAULT,
        "THEME": dict(THEME_DEFAULT),
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    from logger import Logger

    log = Logger().setup_logger("Config")
    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("Ignoring unreadable %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        log.warning("Ignoring %s: top level must be an object", CONFIG_JSON)
        return cfg

    table = data.get("table")
    if isinstance(table, dict):
        height = table.get("height")
        if isinstance(height, int) and not isinstance(height, bool) and height > 0:
            cfg["TABLE_HEIGHT"] = height
        elif height is not None:
            log.warning("Ignoring table.height=%r", height)

        delimiter = table.get("delimiter")
        if isinstance(delimiter, str) and len(delimiter) == 1:
            cfg["DELIMITER"] = delimiter
        elif delimiter is not None and delimiter != "auto":
            log.warning("Ignoring table.delimiter=%r", delimiter)

    theme = data.get("theme")
    if isinstance(theme, dict):
        for key in THEME_DEFAULT:
            if key not in theme:
                continue
            if _is_color(theme[key]):
                cfg["THEME"][key] = theme[key]
            else:
                log.warning("Ignoring theme.%s=%r", key, theme[key])

    return cfg
