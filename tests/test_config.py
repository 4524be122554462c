from datetime import datetime, timezone

import pytest

from multiarchtuning.conditions import ConditionStatus, find_condition
from multiarchtuning.config import (
    ClusterPodPlacementConfig,
    ClusterPodPlacementConfigSpec,
    ClusterPodPlacementConfigStatus,
    ClusterPodPlacementConfigValidator,
)
from multiarchtuning.plugins import (
    NodeAffinityScoring,
    NodeAffinityScoringPlatformTerm,
    Plugins,
)

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T1 = datetime(2024, 1, 2, tzinfo=timezone.utc)

# inputs: ctrl avail, webhook avail, ctrl up-to-date, webhook up-to-date, mwc avail, deprov
# expected: degraded, deprov, mwc not avail, ctrl not ready, webhook not ready,
#           available, progressing, can deploy
BUILD_CASES = [
    ("Deprovisioning", (True, True, True, True, True, True),
     (False, True, False, False, False, True, False, False)),
    ("AllAvailableAndUpToDate", (True, True, True, True, True, False),
     (False, False, False, False, False, True, False, True)),
    ("MutatingWebhookConfigurationNotAvailable", (True, True, True, True, False, False),
     (True, False, True, False, False, False, True, True)),
    ("PodPlacementControllerNotAvailable", (False, True, False, True, True, False),
     (True, False, False, True, False, False, True, False)),
    ("PodPlacementWebhookNotUpToDate", (True, True, True, False, True, False),
     (False, False, False, False, True, True, True, True)),
]


@pytest.mark.parametrize("name,inputs,expected", BUILD_CASES, ids=[c[0] for c in BUILD_CASES])
def test_build_flags(name, inputs, expected):
    status = ClusterPodPlacementConfigStatus()
    status.build(*inputs, now=T0)
    got = (
        status.is_degraded,
        status.is_deprovisioning,
        status.is_mutating_webhook_configuration_not_available,
        status.is_pod_placement_controller_not_ready,
        status.is_pod_placement_webhook_not_ready,
        status.is_ready,
        status.is_progressing,
        status.can_deploy_mutating_webhook,
    )
    assert got == expected


def test_build_sets_all_conditions_in_order():
    status = ClusterPodPlacementConfigStatus()
    status.build(True, True, True, True, True, False, now=T0)
    assert [c.type for c in status.conditions] == [
        "Available",
        "Progressing",
        "Degraded",
        "Deprovisioning",
        "PodPlacementControllerNotRolledOut",
        "PodPlacementWebhookNotRolledOut",
        "MutatingWebhookConfigurationNotAvailable",
    ]
    assert all(c.last_transition_time == T0 for c in status.conditions)


def test_build_ready_condition_texts():
    status = ClusterPodPlacementConfigStatus()
    status.build(True, True, True, True, True, False, now=T0)
    available = find_condition(status.conditions, "Available")
    assert available.status == ConditionStatus.TRUE
    assert available.reason == "AllComponentsReady"
    assert available.message == (
        "The cluster pod placement config operand is ready. We can gate and reconcile pods."
    )
    degraded = find_condition(status.conditions, "Degraded")
    assert degraded.status == ConditionStatus.FALSE
    assert degraded.reason == "NotDegraded"
    controller = find_condition(status.conditions, "PodPlacementControllerNotRolledOut")
    assert controller.reason == "PodPlacementControllerReady"
    assert controller.message == "The pod placement controller is fully rolled out."


def test_build_not_ready_condition_texts():
    status = ClusterPodPlacementConfigStatus()
    status.build(False, True, False, True, False, False, now=T0)
    available = find_condition(status.conditions, "Available")
    assert available.status == ConditionStatus.FALSE
    assert available.reason == (
        "PodPlacementControllerNotRolledOutMutatingWebhookConfigurationNotAvailable"
    )
    assert available.message == (
        "The cluster pod placement config operand is not ready. We cannot gate and reconcile pods."
    )
    controller = find_condition(status.conditions, "PodPlacementControllerNotRolledOut")
    assert controller.status == ConditionStatus.TRUE
    assert controller.reason == "PodPlacementControllerNotReady"
    mwc = find_condition(status.conditions, "MutatingWebhookConfigurationNotAvailable")
    assert mwc.message == "The mutating webhook configuration is not ready."


def test_build_deprovisioning_message():
    status = ClusterPodPlacementConfigStatus()
    status.build(True, True, True, True, True, True, now=T0)
    deprov = find_condition(status.conditions, "Deprovisioning")
    assert deprov.status == ConditionStatus.TRUE
    assert deprov.reason == "Deprovisioning"
    assert deprov.message.startswith(
        "The cluster pod placement config operand is being deprovisioned. Some pods"
    )


def test_rebuild_keeps_transition_time_when_status_unchanged():
    status = ClusterPodPlacementConfigStatus()
    status.build(True, True, True, True, True, False, now=T0)
    status.build(True, True, True, True, False, False, now=T1)
    assert len(status.conditions) == 7
    assert find_condition(status.conditions, "Available").last_transition_time == T1
    assert find_condition(status.conditions, "Deprovisioning").last_transition_time == T0


def _config_with_terms(*terms):
    scoring = NodeAffinityScoring(
        enabled=True,
        platforms=[NodeAffinityScoringPlatformTerm(arch, weight) for arch, weight in terms],
    )
    return ClusterPodPlacementConfig(
        spec=ClusterPodPlacementConfigSpec(plugins=Plugins(node_affinity_scoring=scoring))
    )


def test_validator_accepts_unique_architectures():
    validator = ClusterPodPlacementConfigValidator()
    assert validator.validate_create(_config_with_terms(("amd64", 50), ("arm64", 20))) == []


def test_validator_rejects_duplicate_architecture_on_create_and_update():
    validator = ClusterPodPlacementConfigValidator()
    bad = _config_with_terms(("amd64", 50), ("amd64", 20))
    with pytest.raises(ValueError, match="duplicate architecture"):
        validator.validate_create(bad)
    with pytest.raises(ValueError, match="duplicate architecture"):
        validator.validate_update(ClusterPodPlacementConfig(), bad)


def test_validator_without_plugins():
    validator = ClusterPodPlacementConfigValidator()
    assert validator.validate_create(ClusterPodPlacementConfig()) == []


def test_validator_rejects_other_objects():
    with pytest.raises(TypeError, match="not a ClusterPodPlacementConfig"):
        ClusterPodPlacementConfigValidator().validate_create(object())


def test_validator_delete_allows_anything():
    bad = _config_with_terms(("amd64", 1), ("amd64", 2))
    assert ClusterPodPlacementConfigValidator().validate_delete(bad) == []