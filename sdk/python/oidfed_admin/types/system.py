from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from .common import ApiModel, Id


class LogSeverity(str, Enum):
    VERBOSE = "Verbose"
    DEBUG = "Debug"
    INFO = "Info"
    WARN = "Warn"
    ERROR = "Error"
    ASSERT = "Assert"


class ServerStatus(ApiModel):
    status: Optional[str] = None


class LogEntry(ApiModel):
    id: Optional[Id] = None
    severity: Optional[str] = None
    message: Optional[str] = None
    tag: Optional[str] = None
    timestamp: Optional[Any] = None
    throwable_message: Optional[str] = None
    throwable_stacktrace: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None
