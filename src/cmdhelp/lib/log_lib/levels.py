"""
THAC0 verbosity level constants.

The emit rule is:

    message.level <= threshold  ->  message is shown

The threshold is the global verbosity or a per-channel override. The
constants are for readability; callers may pass raw integers.

    <-- quieter ----------- default ----------- louder -->
    -4    -3     -2       -1      0       1      2      3
    wall  errors warnings minimal default detail layout debug
"""

DEBUG = 3          # Per-row layout decisions, trace output
LAYOUT = 2         # Column widths, wrap widths, selected node
DETAIL = 1         # Model loading summary, width detection
DEFAULT = 0        # Normal CLI output

MINIMAL = -1       # Opt-in channels sit here until enabled
WARNING = -2       # Warnings
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall, exit code only
