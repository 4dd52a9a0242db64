from .loader import load_config
from .validation import validate_config

__all__ = ["load_config", "validate_config"]
