"""Fixed configuration for Mixed Units.

The display currency is a constant. It is never read from the environment
locale.
"""

import json

CURRENCY_CODE = "USD"
CURRENCY_SYMBOL = "$"
MINOR_UNITS_PER_MAJOR = 100

# Placeholder buffer shown before the user provides input
DEFAULT_INPUT = json.dumps(
    {
        "example_1": "0.445454",
        "example_2": 0.342535,
        "example_3": 34343,
    },
    indent=2,
)

# Number of input buffers kept for undo/redo in the interactive session
HISTORY_SIZE = 50

LOG_LEVEL_ENVVAR = "MIXEDUNITS_LOG_LEVEL"
