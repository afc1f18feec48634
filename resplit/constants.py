"""Constants for resplit - split mode names."""

# Split modes
# delimiter_end: the matched delimiter terminates the piece before it
# delimiter_start: the matched delimiter opens the piece after it
DELIMITER_END = "delimiter_end"
DELIMITER_START = "delimiter_start"

SPLIT_MODES = (DELIMITER_END, DELIMITER_START)
DEFAULT_MODE = DELIMITER_END
