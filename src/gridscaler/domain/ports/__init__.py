from .grid_status import GridStatusPort
from .logger import EventLoggerPort

__all__ = ["EventLoggerPort", "GridStatusPort"]
