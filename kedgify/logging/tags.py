# kedgify/logging/tags.py
"""
Logging subsystem tags.

Prefix log messages with these so output stays searchable.
"""

RESOLVE = "[RESOLVE]"
SPLIT = "[SPLIT]"
PIPELINE = "[PIPELINE]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
