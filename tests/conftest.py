"""Shared pytest fixtures for tests."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def mock_paginated_client():
    def _create_client(pages: list[dict]) -> Mock:
        client = Mock()
        paginator = Mock()
        paginator.paginate.return_value = pages
        client.get_paginator.return_value = paginator
        return client

    return _create_client


@pytest.fixture
def mock_ecs_client():
    return Mock()


@pytest.fixture
def mock_ecs_service():
    service = Mock()
    service.list_clusters.return_value = ["prod"]
    service.list_services.return_value = ["web-api"]
    service.list_tasks.return_value = ["abcd1234"]
    service.list_containers.return_value = ["nginx"]
    return service


@pytest.fixture
def mock_chooser():
    chooser = Mock()
    chooser.choose.return_value = 0
    chooser.ask_text.return_value = "bash"
    return chooser
