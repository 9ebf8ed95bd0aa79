from pwmonitor.runtime.config import MonitorSettings, get_settings
from pwmonitor.runtime.logging import RingBufferHandler, create_logger, get_logger, ring_buffer

__all__ = ["MonitorSettings", "get_settings", "RingBufferHandler", "create_logger", "get_logger", "ring_buffer"]
