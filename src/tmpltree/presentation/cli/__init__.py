"""
CLI 명령어
"""

from .tree_commands import cli, main

__all__ = ["cli", "main"]
