import json

from ._config import get_config


def payload_str(value: object) -> str:
    """Serialize a wrapped payload for `str()` rendering.

    JSON is tried first, so strings come out double-quoted. Anything JSON can't encode falls back to `repr()`.
    """
    cfg = get_config()
    try:
        text = json.dumps(value, ensure_ascii=cfg.ensure_ascii)
    except (TypeError, ValueError):
        text = repr(value)
    if cfg.str_max_len and len(text) > cfg.str_max_len:
        return f"{text[: cfg.str_max_len]}..."
    return text
