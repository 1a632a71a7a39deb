"""AWS ECS service layer - handles all AWS API interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .features.cluster.cluster import ClusterService
from .features.container.container import ContainerService
from .features.service.service import ServiceService
from .features.task.task import TaskService

if TYPE_CHECKING:
    from mypy_boto3_ecs import ECSClient


class ECSService:
    """Lookups for each level of the cluster -> service -> task -> container hierarchy."""

    def __init__(self, ecs_client: ECSClient) -> None:
        self.ecs_client = ecs_client
        self._cluster = ClusterService(ecs_client)
        self._service = ServiceService(ecs_client)
        self._task = TaskService(ecs_client)
        self._container = ContainerService(ecs_client)

    def list_clusters(self) -> list[str]:
        return self._cluster.get_cluster_names()

    def list_services(self, cluster_name: str) -> list[str]:
        return self._service.get_services(cluster_name)

    def list_tasks(self, cluster_name: str, service_name: str) -> list[str]:
        """Task ids of the service's tasks."""
        return self._task.get_task_ids(cluster_name, service_name)

    def list_containers(self, cluster_name: str, task_id: str) -> list[str]:
        """Container names of a task."""
        return self._container.get_container_names(cluster_name, task_id)
