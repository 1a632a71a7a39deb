"""Construction of the ``aws ecs execute-command`` line."""

from __future__ import annotations

from .context import SelectionContext

DEFAULT_CLI_NAME = "aws"
DEFAULT_SERVICE_SUBCOMMAND = "ecs"


def build_execute_command(
    context: SelectionContext,
    cli_name: str = DEFAULT_CLI_NAME,
    service_subcommand: str = DEFAULT_SERVICE_SUBCOMMAND,
) -> str:
    """Build the execute-command line for a fully bound context.

    Values are interpolated as-is, without shell quoting. A command such as
    ``ls -la`` must be quoted by whoever runs the line.
    """
    if not context.is_complete:
        raise ValueError(f"Selection is incomplete: {context}")

    return (
        f"{cli_name} --profile {context.profile} {service_subcommand} execute-command"
        f" --cluster {context.cluster} --container {context.container}"
        f" --interactive --command {context.command} --task {context.task}"
    )
