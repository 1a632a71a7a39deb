"""Base class for AWS service interactions."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from .errors import LookupFailedError

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class BaseAWSService:
    """Base class for AWS service interactions with common patterns."""

    def __init__(self, ecs_client: ECSClient) -> None:
        self.ecs_client = ecs_client

    @contextmanager
    def lookup(self, operation: str) -> Iterator[None]:
        """Raise AWS SDK errors from the block as LookupFailedError."""
        try:
            yield
        except (BotoCoreError, ClientError) as e:
            raise LookupFailedError(operation, e) from e
