"""Service operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...core.arn import ResourceType, extract_identifier
from ...core.base import BaseAWSService
from ...core.utils import paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class ServiceService(BaseAWSService):
    """Service for ECS service operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def get_services(self, cluster_name: str) -> list[str]:
        with self.lookup("ListServices"):
            service_arns = paginate_aws_list(self.ecs_client, "list_services", "serviceArns", cluster=cluster_name)
        return [extract_identifier(arn, ResourceType.SERVICE, [cluster_name]) for arn in service_arns]
