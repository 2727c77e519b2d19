"""``dotnet new`` invocation.

The template generator is an external process. A workspace whose packages
have not been restored makes ``dotnet new`` refuse to run; in that single
case the command is retried once with ``--force``. Every other failure is
raised to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..config import Config
from ..errors import GeneratorError
from ..logging_config import fields
from ..utils import run_command

NOT_RESTORED_SIGNATURE = "is not restored"


@dataclass
class GeneratorResult:
    """Outcome of a successful ``dotnet new`` run."""

    command: str
    stdout: str = ""
    stderr: str = ""
    forced: bool = False


class DotnetTemplateGenerator:
    """Runs ``dotnet new <template> -n <name>`` in a target directory."""

    def __init__(self, config: Config, logger: logging.Logger):
        self.config = config
        self.logger = logger

    async def generate(self, template_id: str, name: str, cwd: str | Path) -> GeneratorResult:
        """Generate files from *template_id* named *name* inside *cwd*.

        Raises:
            GeneratorError: If the generator cannot be started or fails for
                any reason other than an unrestored workspace, or if the
                forced retry fails too.
        """
        cmd = [self.config.dotnet_binary, "new", template_id, "-n", name]
        self.logger.debug("Executing dotnet command", extra=fields(command=" ".join(cmd), cwd=str(cwd)))

        returncode, stdout, stderr = await self._run(cmd, cwd)
        if returncode == 0:
            self.logger.info("Template created", extra=fields(template=template_id, name=name))
            return GeneratorResult(command=" ".join(cmd), stdout=stdout, stderr=stderr)

        if NOT_RESTORED_SIGNATURE not in f"{stdout}\n{stderr}":
            raise GeneratorError(
                f"dotnet new failed (exit {returncode}): {stderr or stdout}",
                command=" ".join(cmd),
                stderr=stderr,
            )

        self.logger.warning("Project not restored, using --force option", extra=fields(stderr=stderr))
        forced_cmd = cmd + ["--force"]
        returncode, stdout, stderr = await self._run(forced_cmd, cwd)
        if returncode != 0:
            raise GeneratorError(
                f"dotnet new --force failed (exit {returncode}): {stderr or stdout}",
                command=" ".join(forced_cmd),
                stderr=stderr,
            )

        self.logger.info("Template created with --force", extra=fields(template=template_id, name=name))
        return GeneratorResult(command=" ".join(forced_cmd), stdout=stdout, stderr=stderr, forced=True)

    async def _run(self, cmd: list[str], cwd: str | Path) -> tuple[int, str, str]:
        try:
            return await run_command(cmd, cwd=cwd, timeout=self.config.generator_timeout)
        except FileNotFoundError:
            raise GeneratorError(
                f"dotnet binary not found: '{self.config.dotnet_binary}'. "
                "Ensure the .NET SDK is installed and in PATH.",
                command=" ".join(cmd),
            )
        except PermissionError:
            raise GeneratorError(
                f"Permission denied executing: '{self.config.dotnet_binary}'.",
                command=" ".join(cmd),
            )
