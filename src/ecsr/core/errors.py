"""Error types raised by ecsr. Every one of them aborts the run."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from .arn import ResourceType


class EcsrError(Exception):
    """Base class for all errors reported to the user."""


class CredentialsFileMissingError(EcsrError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"AWS credentials file not found: {path}")
        self.path = path


class CredentialsFileUnreadableError(EcsrError):
    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Cannot read AWS credentials file {path}: {cause}")
        self.path = path
        self.cause = cause


class LookupFailedError(EcsrError):
    """An ECS API call failed (auth, network, not found)."""

    def __init__(self, operation: str, cause: Exception | str) -> None:
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


class MalformedIdentifierError(EcsrError):
    """An ARN returned by ECS did not match the template of its resource type."""

    def __init__(self, arn: str, resource_type: ResourceType) -> None:
        super().__init__(f"Unexpected {resource_type.value} ARN: {arn}")
        self.arn = arn
        self.resource_type = resource_type


class NoCandidatesError(EcsrError):
    def __init__(self, stage: str) -> None:
        super().__init__(f"No {stage} found")
        self.stage = stage


class PromptAbortedError(EcsrError):
    def __init__(self, prompt: str) -> None:
        super().__init__(f"Aborted at prompt: {prompt}")
        self.prompt = prompt


class SelectionOutOfRangeError(EcsrError):
    """The chooser returned an index outside the candidate list."""

    def __init__(self, stage: str, index: int, size: int) -> None:
        super().__init__(f"Invalid {stage} selection {index} (expected 0..{size - 1})")
        self.stage = stage
        self.index = index
        self.size = size
