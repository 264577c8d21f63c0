# Board dimension bounds (inclusive).
MIN_ROWS = 2
MAX_ROWS = 10
MIN_COLS = 2
MAX_COLS = 10

# Number of distinct tile colors (inclusive bounds).
MIN_COLORS = 1
MAX_COLORS = 6

# Group-size thresholds for icon tiers (inclusive bounds, shared by a, b and c).
MIN_GROUP_SIZE = 1
MAX_GROUP_SIZE = 10

# Smallest group that can be cleared by an activation.
MIN_CLEARABLE_GROUP = 2

# Defaults used when a setting is missing or cannot be parsed.
# Columns default above MAX_COLS on purpose; it clamps down like any other input.
DEFAULT_ROWS = 10
DEFAULT_COLS = 12
DEFAULT_COLORS = 6
DEFAULT_GROUP_SIZE_A = 2
DEFAULT_GROUP_SIZE_B = 3
DEFAULT_GROUP_SIZE_C = 5

# Number of gravity passes run after a group is cleared.
CASCADE_PASSES = 2

# Window of preceding slots an element may swap with during a biased shuffle.
SHUFFLE_WINDOW = 2
