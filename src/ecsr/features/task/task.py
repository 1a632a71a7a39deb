"""Task operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.arn import ResourceType, extract_identifier
from ...core.base import BaseAWSService
from ...core.utils import paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class TaskService(BaseAWSService):
    """Service for ECS task operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def get_task_ids(self, cluster_name: str, service_name: str) -> list[str]:
        with self.lookup("ListTasks"):
            task_arns = paginate_aws_list(
                self.ecs_client, "list_tasks", "taskArns", cluster=cluster_name, serviceName=service_name
            )
        return [extract_identifier(arn, ResourceType.TASK, [cluster_name]) for arn in task_arns]
