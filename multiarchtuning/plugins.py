"""Configurable plugins of the cluster pod placement config."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

NODE_AFFINITY_SCORING_PLUGIN_NAME = "NodeAffinityScoring"
EXEC_FORMAT_ERROR_MONITOR_PLUGIN_NAME = "execFormatErrorMonitor"


def _required_enabled(data: dict[str, Any]) -> bool:
    if "enabled" not in data:
        raise ValueError("plugin configuration requires the 'enabled' field")
    return bool(data["enabled"])


@dataclass
class BasePlugin:
    """A plugin that can be switched on or off."""

    enabled: bool = False

    def name(self) -> str:
        """Return the plugin's name."""
        return "BasePlugin"

    def to_dict(self) -> dict[str, Any]:
        return {"enabled": self.enabled}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BasePlugin:
        return cls(enabled=_required_enabled(data))


@dataclass
class ExecFormatErrorMonitor(BasePlugin):
    """Reports and monitors exec format errors."""

    def name(self) -> str:
        return EXEC_FORMAT_ERROR_MONITOR_PLUGIN_NAME


@dataclass
class NodeAffinityScoringPlatformTerm:
    """Weight given to nodes of one architecture."""

    architecture: str
    weight: int

    def to_dict(self) -> dict[str, Any]:
        return {"architecture": self.architecture, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NodeAffinityScoringPlatformTerm:
        return cls(architecture=data["architecture"], weight=int(data["weight"]))


@dataclass
class NodeAffinityScoring(BasePlugin):
    """Scores nodes by architecture through preferred node affinities."""

    platforms: list[NodeAffinityScoringPlatformTerm] = field(default_factory=list)

    def name(self) -> str:
        return NODE_AFFINITY_SCORING_PLUGIN_NAME

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "platforms": [term.to_dict() for term in self.platforms],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NodeAffinityScoring:
        return cls(
            enabled=_required_enabled(data),
            platforms=[
                NodeAffinityScoringPlatformTerm.from_dict(term)
                for term in data.get("platforms") or []
            ],
        )


@dataclass
class Plugins:
    """The set of plugins configured for the operand; unset plugins are None."""

    node_affinity_scoring: Optional[NodeAffinityScoring] = None
    exec_format_error_monitor: Optional[ExecFormatErrorMonitor] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.node_affinity_scoring is not None:
            result["nodeAffinityScoring"] = self.node_affinity_scoring.to_dict()
        if self.exec_format_error_monitor is not None:
            result["execFormatErrorMonitor"] = self.exec_format_error_monitor.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Plugins:
        scoring = data.get("nodeAffinityScoring")
        monitor = data.get("execFormatErrorMonitor")
        return cls(
            node_affinity_scoring=(
                NodeAffinityScoring.from_dict(scoring) if scoring is not None else None
            ),
            exec_format_error_monitor=(
                ExecFormatErrorMonitor.from_dict(monitor) if monitor is not None else None
            ),
        )