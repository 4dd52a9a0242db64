"""Helm Templexer - render Helm charts for multiple deployments.

Drives ``helm template`` once per configured deployment and writes the
rendered manifests to a predictable output tree.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
