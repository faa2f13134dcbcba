"""
File Management Module

Provides output directory management and JSON file writing.
"""

from .manager import FileManager

__all__ = ["FileManager"]
