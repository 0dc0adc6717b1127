"""
boxtable shared constants and module-level state.
Standalone module — no imports from other project files.
"""

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

VALID_ALIGNMENTS = {"left", "right", "center"}

# ---------------------------------------------------------------------------
# Module-level state (set from code, e.g. config.DEBUG_LOG_ENABLED = True)
# ---------------------------------------------------------------------------

DEBUG_LOG_ENABLED = False
