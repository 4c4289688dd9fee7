from enum import Enum

from rulebook.builder import OutputStatus
from rulebook.rules.models import Priority


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


PRIORITY_STYLE = {
    Priority.CRITICAL: UIStyle.RED.value,
    Priority.HIGH: UIStyle.YELLOW.value,
    Priority.MEDIUM: UIStyle.CYAN.value,
    Priority.LOW: UIStyle.DIM.value,
}

OUTPUT_STATUS_STYLE = {
    OutputStatus.CREATE: UIStyle.GREEN.value,
    OutputStatus.UPDATE: UIStyle.CYAN.value,
    OutputStatus.NOOP: UIStyle.DIM.value,
}
