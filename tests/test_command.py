"""Tests for execute-command construction."""

import pytest

from ecsr.core.arn import ResourceType, extract_identifier
from ecsr.core.command import build_execute_command
from ecsr.core.context import SelectionContext


def _context(**overrides: str) -> SelectionContext:
    values = {
        "profile": "dev",
        "cluster": "prod",
        "service": "web-api",
        "task": "abcd1234",
        "container": "nginx",
        "command": "bash",
    }
    values.update(overrides)
    return SelectionContext(**values)


def test_build_execute_command():
    assert build_execute_command(_context()) == (
        "aws --profile dev ecs execute-command --cluster prod --container nginx --interactive --command bash"
        " --task abcd1234"
    )


def test_build_execute_command_is_deterministic():
    assert build_execute_command(_context()) == build_execute_command(_context())


def test_service_is_not_part_of_command():
    assert build_execute_command(_context(service="worker")) == build_execute_command(_context())


def test_values_are_passed_through_unquoted():
    line = build_execute_command(_context(command="ls -la | grep 'x'"))

    assert "--command ls -la | grep 'x' --task" in line


def test_empty_command_is_kept():
    assert "--command  --task abcd1234" in build_execute_command(_context(command=""))


def test_custom_cli_name_and_subcommand():
    line = build_execute_command(_context(), cli_name="awsv2", service_subcommand="ecs-alt")

    assert line.startswith("awsv2 --profile dev ecs-alt execute-command ")


def test_incomplete_context_is_rejected():
    with pytest.raises(ValueError, match="incomplete"):
        build_execute_command(SelectionContext(profile="dev", cluster="prod"))


def test_end_to_end_from_arns():
    prefix = "arn:aws:ecs:us-east-1:123456789012"
    cluster = extract_identifier(f"{prefix}:cluster/prod", ResourceType.CLUSTER)
    service = extract_identifier(f"{prefix}:service/prod/web-api", ResourceType.SERVICE, [cluster])
    task = extract_identifier(f"{prefix}:task/prod/abcd1234", ResourceType.TASK, [cluster])

    context = (
        SelectionContext(profile="dev")
        .bind(cluster=cluster)
        .bind(service=service)
        .bind(task=task)
        .bind(container="nginx")
        .bind(command="bash")
    )

    assert build_execute_command(context) == (
        "aws --profile dev ecs execute-command --cluster prod --container nginx --interactive --command bash"
        " --task abcd1234"
    )
