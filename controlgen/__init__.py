"""Control catalog generator for TypeScript declaration files."""

from .config import ControlGenConfig, load_config
from .errors import ControlGenError
from .pipeline import Pipeline
from .printer import sorted_print

__version__ = "0.1.0"

__all__ = ["ControlGenConfig", "ControlGenError", "Pipeline", "load_config", "sorted_print"]
