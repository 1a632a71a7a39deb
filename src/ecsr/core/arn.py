"""ARN parsing for ECS resources."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum

from .errors import MalformedIdentifierError

ARN_PREFIX = r"arn:aws(?:-[a-z]+)*:ecs:[^:]+:[0-9]{12}:"


class ResourceType(Enum):
    CLUSTER = "cluster"
    SERVICE = "service"
    TASK = "task"


# Number of parent path segments between the resource type and the identifier
_PARENT_COUNTS = {
    ResourceType.CLUSTER: 0,
    ResourceType.SERVICE: 1,
    ResourceType.TASK: 1,
}


def build_pattern(resource_type: ResourceType, parents: Sequence[str] = ()) -> re.Pattern[str]:
    """Build the anchored pattern for an ARN of ``resource_type`` under ``parents``."""
    expected = _PARENT_COUNTS[resource_type]
    if len(parents) != expected:
        raise ValueError(f"{resource_type.value} ARNs take {expected} parent(s), got {len(parents)}")

    path = "".join(f"{re.escape(parent)}/" for parent in parents)
    return re.compile(f"{ARN_PREFIX}{resource_type.value}/{path}(.+)")


def parse_identifier(arn: str, resource_type: ResourceType, parents: Sequence[str] = ()) -> str | None:
    """Return the short identifier of ``arn``, or None when it does not match the template."""
    match = build_pattern(resource_type, parents).fullmatch(arn)
    return match.group(1) if match else None


def extract_identifier(arn: str, resource_type: ResourceType, parents: Sequence[str] = ()) -> str:
    """Return the short identifier of ``arn``.

    Cluster ARNs yield the cluster name, service ARNs the service name and task ARNs
    the task id. Service and task ARNs must sit under the cluster given in ``parents``.

    Raises:
        MalformedIdentifierError: ``arn`` does not match the template.
    """
    identifier = parse_identifier(arn, resource_type, parents)
    if identifier is None:
        raise MalformedIdentifierError(arn, resource_type)
    return identifier
