"""API group versions and object metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

GROUP = "multiarch.openshift.io"

CLUSTER_POD_PLACEMENT_CONFIG_RESOURCE = "clusterpodplacementconfigs"
CLUSTER_POD_PLACEMENT_CONFIG_KIND = "ClusterPodPlacementConfig"


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def api_version(self) -> str:
        """Return the apiVersion string; the core group has no prefix."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def __str__(self) -> str:
        return self.api_version()


V1ALPHA1 = GroupVersion(GROUP, "v1alpha1")
V1BETA1 = GroupVersion(GROUP, "v1beta1")


@dataclass
class ObjectMeta:
    """Metadata shared by every stored object; unset maps are None."""

    name: str = ""
    namespace: str = ""
    labels: Optional[dict[str, str]] = None
    annotations: Optional[dict[str, str]] = None
    generation: int = 0