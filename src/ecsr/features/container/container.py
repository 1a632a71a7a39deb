"""Container operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.errors import LookupFailedError

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import FailureTypeDef


class ContainerService(BaseAWSService):
    """Service for ECS container operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def get_container_names(self, cluster_name: str, task_id: str) -> list[str]:
        """Names of the containers in a task, in the order ECS reports them."""
        with self.lookup("DescribeTasks"):
            response = self.ecs_client.describe_tasks(cluster=cluster_name, tasks=[task_id])

        tasks = response.get("tasks", [])
        failures = response.get("failures", [])
        if not tasks and failures:
            raise LookupFailedError("DescribeTasks", _format_failures(failures))

        return [container["name"] for task in tasks for container in task.get("containers", []) if "name" in container]


def _format_failures(failures: list[FailureTypeDef]) -> str:
    return ", ".join(f"{failure.get('arn', '?')}: {failure.get('reason', 'unknown reason')}" for failure in failures)
