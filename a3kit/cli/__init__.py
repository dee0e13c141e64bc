"""
a3kit CLI module.

This module provides the command-line interface for a3kit.
"""

from .parser import CLI, main
from . import utils

__all__ = ["CLI", "main", "utils"]
