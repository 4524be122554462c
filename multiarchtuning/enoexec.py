"""ENoExecEvent objects that report exec format errors in pods."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .meta import ObjectMeta

ENOEXEC_EVENT_KIND = "ENoExecEvent"

_DNS_LABEL = re.compile(r"[a-z0-9]([-a-z0-9]*[a-z0-9])?")
_DNS_SUBDOMAIN = re.compile(r"[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*")
_CONTAINER_ID = re.compile(r".+://[a-f0-9]{64}")

_DNS_LABEL_MAX = 63
_DNS_SUBDOMAIN_MAX = 253


class ValidationError(ValueError):
    """A field holds a value that the schema does not accept."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"{field_name}: {message}")
        self.field = field_name


def _check(field_name: str, value: str, pattern: re.Pattern, max_length: int | None) -> None:
    if not value:
        return
    if max_length is not None and len(value) > max_length:
        raise ValidationError(field_name, f"may not be longer than {max_length} characters")
    if pattern.fullmatch(value) is None:
        raise ValidationError(field_name, f"{value!r} does not match {pattern.pattern}")


@dataclass
class ENoExecEventStatus:
    """Where an exec format error happened; empty fields are unset."""

    node_name: str = ""
    pod_name: str = ""
    pod_namespace: str = ""
    container_id: str = ""
    command: str = ""

    def validate(self) -> None:
        """Raise ValidationError if a set field breaks its schema rule."""
        _check("nodeName", self.node_name, _DNS_LABEL, _DNS_LABEL_MAX)
        _check("podName", self.pod_name, _DNS_SUBDOMAIN, _DNS_SUBDOMAIN_MAX)
        _check("podNamespace", self.pod_namespace, _DNS_SUBDOMAIN, _DNS_SUBDOMAIN_MAX)
        _check("containerID", self.container_id, _CONTAINER_ID, None)


@dataclass
class ENoExecEvent:
    """An exec format error reported for one container of a pod."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    status: ENoExecEventStatus = field(default_factory=ENoExecEventStatus)

    def validate(self) -> None:
        """Raise ValidationError if the status breaks its schema rules."""
        self.status.validate()