from .compiler import compile_plan
from .filters import NameFilter, matches

__all__ = ["NameFilter", "compile_plan", "matches"]
