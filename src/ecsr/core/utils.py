"""Utility functions for ecsr."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Literal

from rich.console import Console
from rich.spinner import Spinner

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient

# stdout is reserved for the generated command
console = Console(stderr=True)


def print_error(message: str) -> None:
    console.print(f"❌ {message}", style="red")


def print_success(message: str) -> None:
    console.print(f"✅ {message}", style="green")


@contextmanager
def show_spinner() -> Iterator[None]:
    """Context manager that shows a spinner while running operations."""
    spinner = Spinner("dots", style="cyan")
    with console.status(spinner):
        yield


def paginate_aws_list(
    client: ECSClient,
    operation_name: Literal["list_clusters", "list_services", "list_tasks"],
    result_key: str,
    **kwargs: str,
) -> list[str]:
    paginator = client.get_paginator(operation_name)  # type: ignore[no-matching-overload]
    page_iterator = paginator.paginate(**kwargs)

    results: list[str] = []
    for page in page_iterator:
        results.extend(page.get(result_key, []))

    return results
