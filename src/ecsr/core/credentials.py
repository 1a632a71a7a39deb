"""Profile discovery from the shared AWS credentials file."""

from __future__ import annotations

from os import environ
from pathlib import Path

from .errors import CredentialsFileMissingError, CredentialsFileUnreadableError


def get_credentials_path() -> Path:
    """Location of the shared credentials file, honouring AWS_SHARED_CREDENTIALS_FILE."""
    override = environ.get("AWS_SHARED_CREDENTIALS_FILE")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".aws" / "credentials"


def parse_profile_names(content: str) -> list[str]:
    """Return section names (``[name]`` lines) in file order."""
    return [line.replace("[", "").replace("]", "") for line in content.splitlines() if line.startswith("[")]


def read_profile_names(path: Path) -> list[str]:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CredentialsFileMissingError(path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialsFileUnreadableError(path, e) from e
    return parse_profile_names(content)
