from .executor import execute
from .runner import run_command

__all__ = ["execute", "run_command"]
