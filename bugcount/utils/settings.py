# bugcount/utils/settings.py

"""
Default settings and constants for bugcount.

This module centralizes:
  - Priority levels used by finding records (lower number = more severe)
  - The tag name of a finding record in a bug collection
  - Stream read size
  - Environment variable names
"""

from typing import Dict

# -----------------------------------------------------------------------------
# Priority levels. A record passes the threshold when priority <= min_priority.
# -----------------------------------------------------------------------------
HIGH_PRIORITY = 1
NORMAL_PRIORITY = 2
LOW_PRIORITY = 3
EXP_PRIORITY = 4
IGNORE_PRIORITY = 5

PRIORITY_NAMES: Dict[int, str] = {
    HIGH_PRIORITY:   "high",
    NORMAL_PRIORITY: "medium",
    LOW_PRIORITY:    "low",
    EXP_PRIORITY:    "experimental",
    IGNORE_PRIORITY: "ignore",
}

# -----------------------------------------------------------------------------
# Bug collection markup
# -----------------------------------------------------------------------------
BUG_INSTANCE_TAG = "BugInstance"
BUG_PATTERN_TAG = "BugPattern"

# Bytes handed to the parser per feed() call
READ_CHUNK_SIZE = 64 * 1024

# -----------------------------------------------------------------------------
# Environment variable names for overriding behavior
# -----------------------------------------------------------------------------
ENV_LOG_LEVEL = "BUGCOUNT_LOG"           # e.g., set to "DEBUG", "INFO", etc.
ENV_DISABLE_COLORS = "BUGCOUNT_NO_COLOR"  # if set, disable terminal colors


def describe_priority(priority: int) -> str:
    """
    Return the human-readable name of `priority`, or the number itself if unknown.
    """
    return PRIORITY_NAMES.get(priority, str(priority))
