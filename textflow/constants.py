"""Constants and configuration for the textflow layout engine."""

class LayoutConstants:
    """Central configuration constants for line wrapping."""

    # Character classes
    WHITESPACE = " \t\n\r"
    BREAKABLE_BEFORE = "[({<|"  # A line may end just before these
    BREAKABLE_AFTER = "])}>.,:;*+-=&/\\"  # A line may end just after these

    # Forced breaks inside a word
    HYPHEN = "-"

    # Widths
    CONSOLE_FALLBACK_WIDTH = 80  # Used when the terminal size is unknown
    DEFAULT_WIDTH = CONSOLE_FALLBACK_WIDTH - 1  # Leave the last console column free

    # Messages
    WIDTH_NOT_POSITIVE_MESSAGE = "Width must be positive, got {}."
    NEGATIVE_INDENT_MESSAGE = "{} must not be negative, got {}."
    INDENT_TOO_WIDE_MESSAGE = "Width {} must exceed {} {}."
    NO_ROOM_FOR_HYPHEN_MESSAGE = "Cannot hyphenate {!r} within a budget of {} column."
