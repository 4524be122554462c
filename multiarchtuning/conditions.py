"""Status conditions and the texts used for the pod placement config."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

SCHEDULING_GATE_NAME = "multiarch.openshift.io/scheduling-gate"

MUTATING_WEBHOOK_CONFIGURATION_NOT_AVAILABLE = "MutatingWebhookConfigurationNotAvailable"
POD_PLACEMENT_CONTROLLER_NOT_ROLLED_OUT_TYPE = "PodPlacementControllerNotRolledOut"
POD_PLACEMENT_WEBHOOK_NOT_ROLLED_OUT_TYPE = "PodPlacementWebhookNotRolledOut"
AVAILABLE_TYPE = "Available"
DEGRADED_TYPE = "Degraded"
PROGRESSING_TYPE = "Progressing"
DEPROVISIONING_TYPE = "Deprovisioning"

MUTATING_WEBHOOK_CONFIGURATION_READY_MSG = "The mutating webhook configuration is %sready."
POD_PLACEMENT_CONTROLLER_ROLLED_OUT_MSG = "The pod placement controller is %sfully rolled out."
POD_PLACEMENT_WEBHOOK_ROLLED_OUT_MSG = "The pod placement webhook is %sfully rolled out."
READY_MSG = (
    "The cluster pod placement config operand is %sready. We can%s gate and reconcile pods."
)
DEGRADED_MSG = "The cluster pod placement config operand is %sdegraded."
PROGRESSING_MSG = "The cluster pod placement config operand is %sprogressing."
DEPROVISIONING_MSG = "The cluster pod placement config operand is %sbeing deprovisioned. %s"
PENDING_DEPROVISIONING_MSG = (
    "Some pods may still have the "
    + SCHEDULING_GATE_NAME
    + "scheduling gate. The pod placement controller is updating them and will terminate."
)
ALL_COMPONENTS_READY = "AllComponentsReady"

_NEGATION = "not "


class ConditionStatus(str, Enum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


@dataclass
class Condition:
    """One observation of an object's state."""

    type: str
    status: ConditionStatus
    reason: str = ""
    message: str = ""
    last_transition_time: Optional[datetime] = None
    observed_generation: int = 0


def find_condition(conditions: list[Condition], condition_type: str) -> Optional[Condition]:
    """Return the condition of the given type, or None."""
    return next((c for c in conditions if c.type == condition_type), None)


def set_condition(
    conditions: list[Condition], condition: Condition, now: Optional[datetime] = None
) -> Condition:
    """Add or update a condition in place.

    The transition time is set when the condition is new or its status changes;
    otherwise only the reason and message are updated.
    """
    timestamp = now if now is not None else datetime.now(timezone.utc)
    existing = find_condition(conditions, condition.type)
    if existing is None:
        stored = dataclasses.replace(condition, last_transition_time=timestamp)
        conditions.append(stored)
        return stored
    if existing.status != condition.status:
        existing.status = condition.status
        existing.last_transition_time = timestamp
    existing.reason = condition.reason
    existing.message = condition.message
    return existing


def condition_from_bool(value: bool) -> ConditionStatus:
    return ConditionStatus.TRUE if value else ConditionStatus.FALSE


def not_from_bool(value: bool) -> str:
    """Return "" for True and "not " for False, for building messages."""
    negated = not value
    return _NEGATION * negated


def trim_and_capitalize(text: str) -> str:
    """Strip surrounding whitespace and upper-case the first character."""
    trimmed = text.strip()
    if not trimmed:
        return trimmed
    return trimmed[0].upper() + trimmed[1:]