"""Selection cascade: profile -> cluster -> service -> task -> container -> command."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from .context import SelectionContext
from .errors import NoCandidatesError, SelectionOutOfRangeError
from .utils import print_success, show_spinner

if TYPE_CHECKING:
    from ..aws_service import ECSService
    from .prompts import Chooser


def run_cascade(
    chooser: Chooser,
    profiles: Sequence[str],
    lookup_factory: Callable[[str], ECSService],
    profile_prompt: str = "Select profile",
) -> SelectionContext:
    """Walk the user through every stage and return the fully bound context.

    ``lookup_factory`` builds the ECS lookups for the chosen profile. Each stage
    consumes the bindings of the previous one, so nothing is fetched for a level
    before its parent has been chosen.
    """
    context = select_profile(chooser, profiles, profile_prompt)
    ecs_service = lookup_factory(_require(context.profile, "profile"))

    context = select_cluster(chooser, ecs_service, context)
    context = select_service(chooser, ecs_service, context)
    context = select_task(chooser, ecs_service, context)
    context = select_container(chooser, ecs_service, context)
    return ask_command(chooser, context)


def select_profile(chooser: Chooser, profiles: Sequence[str], prompt: str) -> SelectionContext:
    profile = pick(chooser, "profile", prompt, profiles)
    return SelectionContext(profile=profile)


def select_cluster(chooser: Chooser, ecs_service: ECSService, context: SelectionContext) -> SelectionContext:
    with show_spinner():
        clusters = ecs_service.list_clusters()
    return context.bind(cluster=pick(chooser, "cluster", "Select cluster", clusters))


def select_service(chooser: Chooser, ecs_service: ECSService, context: SelectionContext) -> SelectionContext:
    cluster = _require(context.cluster, "cluster")
    with show_spinner():
        services = ecs_service.list_services(cluster)
    return context.bind(service=pick(chooser, "service", "Select service", services))


def select_task(chooser: Chooser, ecs_service: ECSService, context: SelectionContext) -> SelectionContext:
    cluster = _require(context.cluster, "cluster")
    service = _require(context.service, "service")
    with show_spinner():
        tasks = ecs_service.list_tasks(cluster, service)
    return context.bind(task=pick(chooser, "task", "Select task", tasks))


def select_container(chooser: Chooser, ecs_service: ECSService, context: SelectionContext) -> SelectionContext:
    cluster = _require(context.cluster, "cluster")
    task = _require(context.task, "task")
    with show_spinner():
        containers = ecs_service.list_containers(cluster, task)
    return context.bind(container=pick(chooser, "container", "Select container", containers))


def ask_command(chooser: Chooser, context: SelectionContext) -> SelectionContext:
    _require(context.container, "container")
    return context.bind(command=chooser.ask_text("Command"))


def pick(chooser: Chooser, stage: str, prompt: str, candidates: Sequence[str]) -> str:
    """Present ``candidates`` and return the chosen one."""
    if not candidates:
        raise NoCandidatesError(stage)

    index = chooser.choose(prompt, candidates)
    if not 0 <= index < len(candidates):
        raise SelectionOutOfRangeError(stage, index, len(candidates))

    selected = candidates[index]
    print_success(f"Selected {stage}: {selected}")
    return selected


def _require(value: str | None, name: str) -> str:
    if value is None:
        raise ValueError(f"No {name} selected yet")
    return value
