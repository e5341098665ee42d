"""Constants and configuration for the red viewer."""

class EditorConstants:
    """Central configuration constants for the viewer."""

    PRODUCT_NAME = "red"

    # Screen layout
    RESERVED_BOTTOM_ROWS = 2  # Status bar + message bar
    WELCOME_ROW_DIVISOR = 3  # Welcome line sits at height // 3
    EMPTY_ROW_MARKER = "~"
    ROW_TERMINATOR = "\r\n"  # Raw mode needs an explicit carriage return

    # Status bar
    FILE_NAME_MAX_WIDTH = 20
    NO_NAME = "[No Name]"
    STATUS_FG_COLOR = (63, 63, 63)
    STATUS_BG_COLOR = (239, 239, 239)

    # Message bar
    MESSAGE_TIMEOUT = 5.0  # Seconds a status message stays visible

    # Messages
    HELP_MESSAGE = "HELP: Ctrl-Q = quit"
    OPEN_ERROR_MESSAGE = "ERR: Could not open file: {}"
    GOODBYE_MESSAGE = "goodbye!"
