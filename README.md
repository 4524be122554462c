# multiarchtuning

This package holds the data model and logic for configuring architecture-aware pod placement in a cluster. It covers:

- the `ClusterPodPlacementConfig` resource, in its current form and in the older `v1alpha1` form,
- the resource's plugins,
- the status conditions the resource reports,
- the `ENoExecEvent` records, which describe a container that failed with an exec format error.

The package has no third-party dependencies.

## Installation

```
pip install multiarchtuning
```

To run the tests:

```
pip install "multiarchtuning[test]"
pytest
```

## Modules

### `multiarchtuning.verbosity`

- `LogVerbosityLevel` is a string enum with the members `Normal`, `Debug`, `Trace` and `TraceAll`.
- `to_zap_level()` returns the numeric log level for a member: `0`, `1`, `2` or `3`.
- `LogVerbosityLevel.parse(value)` turns a string into a level.
  - `None` or an empty string becomes `Normal`.
  - Any other unknown value raises `ValueError`.
- `zap_level(value)` returns the numeric level of a value. It falls back to the `Normal` level when the value is unknown.
- `SINGLETON_RESOURCE_OBJECT_NAME` is `"cluster"`.

### `multiarchtuning.plugins`

The module has these classes:

- `Plugins`
- `BasePlugin`
- `ExecFormatErrorMonitor`
- `NodeAffinityScoring`
- `NodeAffinityScoringPlatformTerm`

Each plugin's `name()` returns its name: `"BasePlugin"`, `"execFormatErrorMonitor"` or `"NodeAffinityScoring"`.

Every class has `to_dict()` and `from_dict()`, which use the resource's camel-case field names. `from_dict()` raises `ValueError` when a plugin has no `enabled` field.

### `multiarchtuning.meta`

- `GroupVersion` is an API group together with one of its versions. `api_version()` returns the `apiVersion` string, such as `"multiarch.openshift.io/v1beta1"`.
- `V1ALPHA1` and `V1BETA1` are the two group versions.
- `ObjectMeta` holds an object's metadata:
  - `name`
  - `namespace`
  - `labels`
  - `annotations`
  - `generation`

### `multiarchtuning.conditions`

This module defines `Condition` and `ConditionStatus`, along with these helpers:

- `set_condition(conditions, condition, now=None)` adds a condition to the list, or updates it in place. The transition time changes only when the condition is new or its status changes.
- `find_condition(conditions, condition_type)` returns the condition of that type, or `None`.
- `condition_from_bool(value)` returns `ConditionStatus.TRUE` or `ConditionStatus.FALSE`.
- `not_from_bool(value)` returns `""` for true and `"not "` for false.
- `trim_and_capitalize(text)` strips surrounding whitespace and upper-cases the first character.

The module also defines the condition type names and message texts.

### `multiarchtuning.enoexec`

This module defines `ENoExecEvent` and `ENoExecEventStatus`. Their `validate()` methods raise `ValidationError`, a subclass of `ValueError`, when a set field breaks the resource's rules:

| Field | Rule |
|---|---|
| node name | DNS label, at most 63 characters |
| pod name | DNS subdomain, at most 253 characters |
| pod namespace | DNS subdomain, at most 253 characters |
| container ID | `<runtime>://` followed by 64 lower-case hex digits |

Empty fields are not checked.

### `multiarchtuning.config`

This module defines `ClusterPodPlacementConfig`, `ClusterPodPlacementConfigSpec` and `ClusterPodPlacementConfigStatus`.

`ClusterPodPlacementConfigStatus.build(...)` takes the state of the components. From it, the method derives these read-only flags:

- `is_ready`
- `is_progressing`
- `is_degraded`
- `is_deprovisioning`
- `is_pod_placement_controller_not_ready`
- `is_pod_placement_webhook_not_ready`
- `is_mutating_webhook_configuration_not_available`
- `can_deploy_mutating_webhook`

It then sets seven conditions on `conditions`.

`ClusterPodPlacementConfigValidator` has three methods:

- `validate_create(obj)`
- `validate_update(old_obj, new_obj)`
- `validate_delete(obj)`

Each returns a list of warnings. The create and update checks raise:

- `TypeError` for an object that is not a `ClusterPodPlacementConfig`,
- `ValueError` when the node affinity scoring platforms list the same architecture twice.

### `multiarchtuning.conversion`

`V1Alpha1ClusterPodPlacementConfig` is the older form of the config.

- `convert_to()` returns the current form.
- `V1Alpha1ClusterPodPlacementConfig.convert_from(hub)` builds the older form from the current one. It drops the plugins and makes sure the annotations are a dictionary.

## Example

```python
from datetime import datetime, timezone

from multiarchtuning.config import ClusterPodPlacementConfigStatus

status = ClusterPodPlacementConfigStatus()
status.build(
    pod_placement_controller_available=True,
    pod_placement_webhook_available=True,
    pod_placement_controller_up_to_date=True,
    pod_placement_webhook_up_to_date=False,
    mutating_webhook_configuration_available=True,
    deprovisioning=False,
    now=datetime.now(timezone.utc),
)
print(status.is_ready, status.is_progressing)  # True True
for condition in status.conditions:
    print(condition.type, condition.status.value, condition.reason)
```

## What the package does not do

- It does not talk to a cluster. It has no API client and no controller that reconciles `ENoExecEvent` objects or labels pods.
- It has no admission webhook server. The validator is a plain class that is called directly.
- It does not store objects. Objects live in memory as dataclasses.