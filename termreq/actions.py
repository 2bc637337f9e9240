"""Actions triggered by keys, names of the focus states and input modes."""

from enum import Enum, auto


class Actions(Enum):
    """Abstract user actions produced by the key listener."""

    NULL = auto()
    SUB_COMMAND = auto()
    QUIT = auto()
    ASK_FOR_HELP = auto()

    EDIT = auto()
    SWITCH = auto()
    SUBMIT = auto()
    UNDO = auto()
    NEW = auto()
    DELETE = auto()

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    GO_TO_TAB_LIST = auto()
    GO_TO_REQUEST = auto()
    GO_TO_RESPONSE = auto()
    GO_TO_LOGS = auto()

    GO_TO_NEXT_TAB = auto()
    GO_TO_PREVIOUS_TAB = auto()

    GO_TO_REQUEST_BODY = auto()
    GO_TO_URL = auto()

    GO_TO_RESPONSE_BODY = auto()
    GO_TO_RESPONSE_HEADERS = auto()

    RENAME_TAB = auto()
    DELETE_TAB = auto()

    SAVE = auto()
    REQUEST_BODY_EDIT = auto()
    REQUEST_HEADERS_EDIT = auto()
    URL_EDIT = auto()
    METHOD_EDIT = auto()
    RELOAD_BODY = auto()

    GROW_HORIZONTAL_UI_RIGHT = auto()
    GROW_HORIZONTAL_UI_LEFT = auto()


class StatesNames(Enum):
    """Names of the sections that can hold the focus."""

    DEFAULT = auto()
    TAB_LIST = auto()
    URL = auto()
    REQUEST_HEADERS = auto()
    REQUEST_BODY = auto()
    RESPONSE_HEADER = auto()
    RESPONSE_BODY = auto()
    LOG = auto()
    EMPTY = auto()


class InputMode(Enum):
    """How keyboard input is currently interpreted."""

    NORMAL = auto()
    INSERT = auto()
    VIM = auto()
    HELP = auto()