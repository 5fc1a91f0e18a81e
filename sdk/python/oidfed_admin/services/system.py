from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from .._http import segment
from ..types.system import LogEntry, LogSeverity, ServerStatus

if TYPE_CHECKING:
    from .._http import HttpClient

logger = logging.getLogger(__name__)

DEFAULT_LOG_LIMIT = 100
MAX_LOG_LIMIT = 1000

_SEVERITIES = frozenset(s.value for s in LogSeverity)


def clamp_log_limit(limit: Any) -> int:
    """Coerce ``limit`` to an int in [1, 1000]; anything unusable becomes 100."""
    try:
        value = int(limit)
    except (TypeError, ValueError):
        return DEFAULT_LOG_LIMIT
    if value > MAX_LOG_LIMIT:
        return MAX_LOG_LIMIT
    if value <= 0:
        return DEFAULT_LOG_LIMIT
    return value


def log_path(severity: Union[LogSeverity, str, None] = None, tag: Optional[str] = None) -> str:
    """Pick the log endpoint: a known severity wins over a tag, neither gives ``/logs``."""
    if isinstance(severity, LogSeverity):
        severity = severity.value
    if severity:
        if severity in _SEVERITIES:
            return f"/logs/severity/{segment(severity)}"
        logger.debug("Ignoring unknown log severity", extra={"severity": severity})
    if tag:
        return f"/logs/tag/{segment(tag)}"
    return "/logs"


class SystemService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def status(self) -> ServerStatus:
        return ServerStatus.model_validate(self._http.get("/status"))

    def logs(
        self,
        limit: Any = DEFAULT_LOG_LIMIT,
        severity: Union[LogSeverity, str, None] = None,
        tag: Optional[str] = None,
    ) -> Union[list[LogEntry], Any]:
        """Fetch recent server log entries, filtered by severity or by tag (not both).

        A JSON array is parsed into :class:`LogEntry` items; any other payload
        (an object envelope, plain text) is returned as the server sent it.
        """
        data = self._http.get(log_path(severity, tag), params={"limit": clamp_log_limit(limit)})
        if isinstance(data, list):
            return [LogEntry.model_validate(entry) for entry in data]
        return data
