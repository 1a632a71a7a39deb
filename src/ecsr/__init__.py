import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

if TYPE_CHECKING:
    from mypy_boto3_ecs import ECSClient

from .aws_service import ECSService
from .core.app import run_cascade
from .core.command import build_execute_command
from .core.credentials import get_credentials_path, read_profile_names
from .core.errors import EcsrError, LookupFailedError
from .core.prompts import Chooser, get_questionary_style
from .core.utils import console, print_error

try:
    __version__ = version("ecsr")
except PackageNotFoundError:
    __version__ = "dev"


def main() -> None:
    """Pick an ECS container interactively and print the matching execute-command line."""
    parser = argparse.ArgumentParser(description="Build an 'aws ecs execute-command' line interactively")
    parser.add_argument("--version", action="version", version=f"ecsr {__version__}")
    parser.parse_args()

    chooser = Chooser(get_questionary_style())

    try:
        path = get_credentials_path()
        console.print(f"Read profile from {path}", style="dim")
        profiles = read_profile_names(path)

        context = run_cascade(
            chooser,
            profiles,
            lambda profile: ECSService(_create_aws_client(profile)),
            profile_prompt=f"Select profile from {path}",
        )
        command = build_execute_command(context)

    except EcsrError as e:
        print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print_error("Aborted")
        sys.exit(130)

    print(command)


def _create_aws_client(profile_name: str) -> "ECSClient":
    """Create an ECS client bound to the given profile. Failed calls are not retried."""
    config = Config(
        max_pool_connections=5,
        retries={"max_attempts": 1, "mode": "standard"},
    )

    try:
        session = boto3.Session(profile_name=profile_name)
        return session.client("ecs", config=config)
    except BotoCoreError as e:
        raise LookupFailedError("CreateClient", e) from e


if __name__ == "__main__":
    main()
