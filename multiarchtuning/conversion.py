"""The v1alpha1 cluster pod placement config and its conversion to the hub."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from .conditions import Condition
from .config import ClusterPodPlacementConfig, ClusterPodPlacementConfigSpec
from .meta import CLUSTER_POD_PLACEMENT_CONFIG_KIND, V1ALPHA1, ObjectMeta
from .verbosity import LogVerbosityLevel


@dataclass
class V1Alpha1ClusterPodPlacementConfigSpec:
    """Desired state in the v1alpha1 API; it has no plugins."""

    log_verbosity: LogVerbosityLevel = LogVerbosityLevel.NORMAL
    namespace_selector: Optional[dict[str, Any]] = None


@dataclass
class V1Alpha1ClusterPodPlacementConfig:
    """Cluster pod placement config as served by the v1alpha1 API."""

    API_VERSION = V1ALPHA1
    KIND = CLUSTER_POD_PLACEMENT_CONFIG_KIND

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: V1Alpha1ClusterPodPlacementConfigSpec = field(
        default_factory=V1Alpha1ClusterPodPlacementConfigSpec
    )
    conditions: list[Condition] = field(default_factory=list)

    def convert_to(self) -> ClusterPodPlacementConfig:
        """Return the hub (v1beta1) form of this object."""
        hub = ClusterPodPlacementConfig(
            metadata=copy.deepcopy(self.metadata),
            spec=ClusterPodPlacementConfigSpec(
                log_verbosity=self.spec.log_verbosity,
                namespace_selector=copy.deepcopy(self.spec.namespace_selector),
            ),
        )
        hub.status.conditions = copy.deepcopy(self.conditions)
        return hub

    @classmethod
    def convert_from(cls, hub: ClusterPodPlacementConfig) -> V1Alpha1ClusterPodPlacementConfig:
        """Build the v1alpha1 form of a hub object; plugins are dropped."""
        metadata = copy.deepcopy(hub.metadata)
        if metadata.annotations is None:
            metadata.annotations = {}
        return cls(
            metadata=metadata,
            spec=V1Alpha1ClusterPodPlacementConfigSpec(
                log_verbosity=hub.spec.log_verbosity,
                namespace_selector=copy.deepcopy(hub.spec.namespace_selector),
            ),
            conditions=copy.deepcopy(hub.status.conditions),
        )