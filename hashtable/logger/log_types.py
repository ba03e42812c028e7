from enum import Enum
from typing import Dict


class LogEvent(str, Enum):
    TABLE_RESIZED = "table_resized"
    TABLE_CLEARED = "table_cleared"


class ResizeLog(Dict):
    event: LogEvent
    old_capacity: int
    new_capacity: int
    length: int


class ClearLog(Dict):
    event: LogEvent
    discarded: int
