from dataclasses import dataclass


@dataclass(slots=True)
class Config:
    """Rendering settings shared by the `str()` of every wrapper.

    Attributes:
        str_max_len (int): Maximum length of a rendered payload, longer ones are cut and suffixed with `...`. `0` disables truncation.
        ensure_ascii (bool): Escape non-ASCII characters when serializing payloads.

    Example:
    ```python
    >>> import tidbits as tb
    >>> cfg = tb.get_config()
    >>> previous = cfg.str_max_len
    >>> cfg.str_max_len = 5
    >>> str(tb.Ok("abcdefghij"))
    'Ok("abcd...)'
    >>> cfg.str_max_len = previous

    ```
    """

    str_max_len: int = 0
    ensure_ascii: bool = False


_CONFIG = Config()


def get_config() -> Config:
    """Get the process-wide `Config` instance.

    Mutate its attributes to change how wrappers are rendered.
    """
    return _CONFIG
