"""
Application-wide constants.

Exit codes, command defaults and limits shared across the command framework.
"""

import re

# Process exit codes. Failure sub-kinds are not distinguished at the shell.
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Command names must be argparse-compatible
COMMAND_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")
MAX_COMMAND_NAME_LENGTH = 64

# Progress demonstration timing
DEFAULT_DURATION_SECONDS = 3
STEPS_PER_SECOND = 10
STEP_INTERVAL_SECONDS = 0.1
PERCENT_COMPLETE = 100.0

# Greet defaults
DEFAULT_GREET_NAME = "World"
DEFAULT_GREET_COUNT = 1

# Shown by `list` when no items are given
FALLBACK_ITEMS: tuple[str, ...] = ("Apple", "Banana", "Cherry", "Date", "Elderberry")

# Timestamp format used by `greet`
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
