from .system_clock import SystemClock
from .timestamp_id_generator import TimestampIdGenerator
from .structured_logger import StructuredLogger

__all__ = ["SystemClock", "TimestampIdGenerator", "StructuredLogger"]
