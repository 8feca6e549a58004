"""Named policies for the behaviors users may want to switch."""

from enum import Enum


class TruncationPolicy(Enum):
    """What to emit for an object-typed field once the depth limit is reached."""
    BARE_FIELD = "bare"       # Field name with no sub-selection
    OMIT_FIELD = "omit"       # Leave the field out
    EXPAND_LEAVES = "leaves"  # One more layer holding only scalar fields


class WriteConflictPolicy(Enum):
    """How to handle target files that already exist in write mode."""
    ALL_OR_NOTHING = "all-or-nothing"  # Any existing file withholds the batch
    SKIP_EXISTING = "skip-existing"    # Write only the missing files
    OVERWRITE = "overwrite"            # Replace existing files
