from __future__ import annotations

import shlex
import subprocess

from .logging import get_logger

__all__ = ["DEFAULT_PRETTIER_COMMAND", "format_code"]

logger = get_logger(__name__)

DEFAULT_PRETTIER_COMMAND = "prettier"


def format_code(code: str, *, command: str = DEFAULT_PRETTIER_COMMAND) -> str:
    """Format generated TypeScript with prettier.

    Formatting never fails generation: when prettier is missing or rejects
    the code, the unformatted code is returned and the problem is logged.
    """
    args = [*shlex.split(command), "--parser", "typescript"]
    try:
        result = subprocess.run(  # noqa: S603
            args,
            input=code,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        logger.warning(
            "Formatter not found, returning unformatted code",
            command=command,
        )
        return code

    if result.returncode != 0:
        logger.warning(
            "There is a syntax error in generated code, returning unformatted code",
            error=result.stderr.strip(),
        )
        return code

    return result.stdout
