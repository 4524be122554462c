"""Log verbosity levels used by the pod placement operands."""

from __future__ import annotations

from enum import Enum

SINGLETON_RESOURCE_OBJECT_NAME = "cluster"


class LogVerbosityLevel(str, Enum):
    """Log level accepted in the operands' custom resources."""

    NORMAL = "Normal"
    DEBUG = "Debug"
    TRACE = "Trace"
    TRACE_ALL = "TraceAll"

    def to_zap_level(self) -> int:
        """Return the numeric logger level that matches this verbosity."""
        return _ZAP_LEVELS[self]

    @classmethod
    def parse(cls, value: str | LogVerbosityLevel | None) -> LogVerbosityLevel:
        """Turn a string into a level; an empty or missing value means Normal."""
        if value is None or value == "":
            return cls.NORMAL
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(level.value for level in cls)
            raise ValueError(
                f"invalid log verbosity level {value!r}; expected one of: {allowed}"
            ) from None


_ZAP_LEVELS = {
    LogVerbosityLevel.NORMAL: 0,
    LogVerbosityLevel.DEBUG: 1,
    LogVerbosityLevel.TRACE: 2,
    LogVerbosityLevel.TRACE_ALL: 3,
}


def zap_level(value: str | LogVerbosityLevel | None) -> int:
    """Return the logger level for a value, falling back to Normal for unknown ones."""
    try:
        return LogVerbosityLevel.parse(value).to_zap_level()
    except ValueError:
        return LogVerbosityLevel.NORMAL.to_zap_level()