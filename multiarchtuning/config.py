"""The cluster pod placement config (hub version) and its admission validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .conditions import (
    ALL_COMPONENTS_READY,
    AVAILABLE_TYPE,
    DEGRADED_MSG,
    DEGRADED_TYPE,
    DEPROVISIONING_MSG,
    DEPROVISIONING_TYPE,
    MUTATING_WEBHOOK_CONFIGURATION_NOT_AVAILABLE,
    MUTATING_WEBHOOK_CONFIGURATION_READY_MSG,
    PENDING_DEPROVISIONING_MSG,
    POD_PLACEMENT_CONTROLLER_NOT_ROLLED_OUT_TYPE,
    POD_PLACEMENT_CONTROLLER_ROLLED_OUT_MSG,
    POD_PLACEMENT_WEBHOOK_NOT_ROLLED_OUT_TYPE,
    POD_PLACEMENT_WEBHOOK_ROLLED_OUT_MSG,
    PROGRESSING_MSG,
    PROGRESSING_TYPE,
    READY_MSG,
    Condition,
    condition_from_bool,
    not_from_bool,
    set_condition,
    trim_and_capitalize,
)
from .meta import CLUSTER_POD_PLACEMENT_CONFIG_KIND, V1BETA1, ObjectMeta
from .plugins import Plugins
from .verbosity import LogVerbosityLevel

DUPLICATE_ARCHITECTURE_MSG = (
    "duplicate architecture in the .spec.plugins.nodeAffinityScoring.platforms list"
)


@dataclass
class ClusterPodPlacementConfigSpec:
    """Desired state of the pod placement operand."""

    log_verbosity: LogVerbosityLevel = LogVerbosityLevel.NORMAL
    namespace_selector: Optional[dict[str, Any]] = None
    plugins: Optional[Plugins] = None


@dataclass
class ClusterPodPlacementConfigStatus:
    """Observed state of the operand, expressed as conditions."""

    conditions: list[Condition] = field(default_factory=list)
    _available: bool = field(default=False, repr=False, compare=False)
    _progressing: bool = field(default=False, repr=False, compare=False)
    _degraded: bool = field(default=False, repr=False, compare=False)
    _deprovisioning: bool = field(default=False, repr=False, compare=False)
    _controller_not_ready: bool = field(default=False, repr=False, compare=False)
    _webhook_not_ready: bool = field(default=False, repr=False, compare=False)
    _mwc_not_available: bool = field(default=False, repr=False, compare=False)
    _can_deploy_mutating_webhook: bool = field(default=False, repr=False, compare=False)

    @property
    def is_ready(self) -> bool:
        return self._available

    @property
    def is_progressing(self) -> bool:
        return self._progressing

    @property
    def is_degraded(self) -> bool:
        return self._degraded

    @property
    def is_deprovisioning(self) -> bool:
        return self._deprovisioning

    @property
    def is_pod_placement_controller_not_ready(self) -> bool:
        return self._controller_not_ready

    @property
    def is_pod_placement_webhook_not_ready(self) -> bool:
        return self._webhook_not_ready

    @property
    def is_mutating_webhook_configuration_not_available(self) -> bool:
        return self._mwc_not_available

    @property
    def can_deploy_mutating_webhook(self) -> bool:
        return self._can_deploy_mutating_webhook

    def build(
        self,
        pod_placement_controller_available: bool,
        pod_placement_webhook_available: bool,
        pod_placement_controller_up_to_date: bool,
        pod_placement_webhook_up_to_date: bool,
        mutating_webhook_configuration_available: bool,
        deprovisioning: bool,
        now: Optional[datetime] = None,
    ) -> None:
        """Derive the state flags from the components and set the conditions."""
        self._deprovisioning = deprovisioning
        self._mwc_not_available = not mutating_webhook_configuration_available
        self._controller_not_ready = not (
            pod_placement_controller_available and pod_placement_controller_up_to_date
        )
        self._webhook_not_ready = not (
            pod_placement_webhook_available and pod_placement_webhook_up_to_date
        )
        self._available = (
            mutating_webhook_configuration_available
            and pod_placement_webhook_available
            and pod_placement_controller_available
        )
        self._degraded = not self._available and not deprovisioning
        self._can_deploy_mutating_webhook = (
            pod_placement_webhook_available
            and pod_placement_controller_available
            and not deprovisioning
        )
        self._progressing = (
            not pod_placement_controller_up_to_date
            or not pod_placement_webhook_up_to_date
            or not mutating_webhook_configuration_available
        ) and not deprovisioning
        self._build_conditions(now)

    def _build_conditions(self, now: Optional[datetime]) -> None:
        reason = "".join(
            part
            for flag, part in (
                (self._controller_not_ready, POD_PLACEMENT_CONTROLLER_NOT_ROLLED_OUT_TYPE),
                (self._webhook_not_ready, POD_PLACEMENT_WEBHOOK_NOT_ROLLED_OUT_TYPE),
                (self._mwc_not_available, MUTATING_WEBHOOK_CONFIGURATION_NOT_AVAILABLE),
            )
            if flag
        ) or ALL_COMPONENTS_READY

        not_available = not_from_bool(self._available)
        controller_ready = not_from_bool(not self._controller_not_ready)
        webhook_ready = not_from_bool(not self._webhook_not_ready)
        postfix = PENDING_DEPROVISIONING_MSG if self._deprovisioning else ""

        updates = [
            Condition(
                AVAILABLE_TYPE,
                condition_from_bool(self._available),
                reason,
                READY_MSG % (not_available, not_available.strip()),
            ),
            Condition(
                PROGRESSING_TYPE,
                condition_from_bool(self._progressing),
                reason,
                PROGRESSING_MSG % not_from_bool(self._progressing),
            ),
            Condition(
                DEGRADED_TYPE,
                condition_from_bool(self._degraded),
                trim_and_capitalize(not_from_bool(self._degraded)) + DEGRADED_TYPE,
                DEGRADED_MSG % not_from_bool(self._degraded),
            ),
            Condition(
                DEPROVISIONING_TYPE,
                condition_from_bool(self._deprovisioning),
                trim_and_capitalize(not_from_bool(self._deprovisioning)) + DEPROVISIONING_TYPE,
                DEPROVISIONING_MSG % (not_from_bool(self._deprovisioning), postfix),
            ),
            Condition(
                POD_PLACEMENT_CONTROLLER_NOT_ROLLED_OUT_TYPE,
                condition_from_bool(self._controller_not_ready),
                f"PodPlacementController{trim_and_capitalize(controller_ready)}Ready",
                POD_PLACEMENT_CONTROLLER_ROLLED_OUT_MSG % controller_ready,
            ),
            Condition(
                POD_PLACEMENT_WEBHOOK_NOT_ROLLED_OUT_TYPE,
                condition_from_bool(self._webhook_not_ready),
                f"PodPlacementWebhook{trim_and_capitalize(webhook_ready)}Ready",
                POD_PLACEMENT_WEBHOOK_ROLLED_OUT_MSG % webhook_ready,
            ),
            Condition(
                MUTATING_WEBHOOK_CONFIGURATION_NOT_AVAILABLE,
                condition_from_bool(self._mwc_not_available),
                reason,
                MUTATING_WEBHOOK_CONFIGURATION_READY_MSG
                % not_from_bool(not self._mwc_not_available),
            ),
        ]
        for condition in updates:
            set_condition(self.conditions, condition, now)


@dataclass
class ClusterPodPlacementConfig:
    """Configuration of the architecture-aware pod placement operand.

    This is the storage and conversion hub version.
    """

    API_VERSION = V1BETA1
    KIND = CLUSTER_POD_PLACEMENT_CONFIG_KIND

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ClusterPodPlacementConfigSpec = field(default_factory=ClusterPodPlacementConfigSpec)
    status: ClusterPodPlacementConfigStatus = field(
        default_factory=ClusterPodPlacementConfigStatus
    )


class ClusterPodPlacementConfigValidator:
    """Admission checks for ClusterPodPlacementConfig objects.

    Each check returns a list of warnings and raises on a rejected object.
    """

    def validate_create(self, obj: object) -> list[str]:
        return self._validate(obj)

    def validate_update(self, old_obj: object, new_obj: object) -> list[str]:
        return self._validate(new_obj)

    def validate_delete(self, obj: object) -> list[str]:
        return []

    @staticmethod
    def _validate(obj: object) -> list[str]:
        if not isinstance(obj, ClusterPodPlacementConfig):
            raise TypeError("not a ClusterPodPlacementConfig")
        plugins = obj.spec.plugins
        if plugins is None or plugins.node_affinity_scoring is None:
            return []
        seen: set[str] = set()
        for term in plugins.node_affinity_scoring.platforms:
            if term.architecture in seen:
                raise ValueError(DUPLICATE_ARCHITECTURE_MSG)
            seen.add(term.architecture)
        return []