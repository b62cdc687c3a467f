from ._config import Config, get_config
from ._format import payload_str
from ._main import Pipeable

__all__ = [
    "Config",
    "Pipeable",
    "get_config",
    "payload_str",
]
