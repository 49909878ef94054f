# kedgify/cli/__init__.py
"""
Command-line interface for kedgify.

Available commands:
- files: Show the manifest files a set of paths resolves to
- split: Print every document found, separated by ---
"""

from kedgify.cli.cli import app

__all__ = ["app"]
