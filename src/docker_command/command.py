"""Subprocess invocation of a container client.

A ``Command`` is a plain description of a process to spawn: the program, its
argument vector, and optional working-directory and environment overrides.
It can be inspected (``argv``, ``command_line()``) without running anything,
or executed synchronously with ``run()`` or on the event loop with
``run_async()``.
"""

import asyncio
import logging
import os
import shlex
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from docker_command.base import (
    CommandExitError,
    CommandSpawnError,
    CommandTimeoutError,
)

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


@dataclass
class CommandOutput:
    """Result of running a command."""

    args: list[str]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        """Check if the command exited with status zero."""
        return self.returncode == 0

    def stdout_string_lossy(self) -> str:
        """Decode stdout as UTF-8, replacing invalid bytes."""
        return self.stdout.decode("utf-8", errors="replace")

    def stderr_string_lossy(self) -> str:
        """Decode stderr as UTF-8, replacing invalid bytes."""
        return self.stderr.decode("utf-8", errors="replace")


@dataclass
class Command:
    """A process invocation: program, arguments, and execution settings.

    Attributes:
        program: Program to run, looked up on PATH if not a path
        args: Arguments passed to the program
        cwd: Working directory for the child (default: inherit)
        env: Environment variables set on top of the inherited environment
        clear_env: Start from an empty environment instead of os.environ
        capture: Capture stdout and stderr instead of inheriting them
        combine_output: Redirect stderr into stdout
        check: Raise CommandExitError on non-zero exit
        log_command: Log the command line before running it
    """

    program: str
    args: list[str] = field(default_factory=list)
    cwd: Path | None = None
    env: dict[str, str] = field(default_factory=dict)
    clear_env: bool = False
    capture: bool = False
    combine_output: bool = False
    check: bool = True
    log_command: bool = True

    def __post_init__(self) -> None:
        self.program = os.fspath(self.program)
        self.args = [os.fspath(arg) for arg in self.args]

    @classmethod
    def with_args(cls, program: StrPath, args: Iterable[StrPath]) -> "Command":
        """Create a command for ``program`` with initial arguments."""
        return cls(program=os.fspath(program), args=[os.fspath(arg) for arg in args])

    def add_arg(self, arg: StrPath) -> "Command":
        """Append a single argument."""
        self.args.append(os.fspath(arg))
        return self

    def add_arg_pair(self, first: StrPath, second: StrPath) -> "Command":
        """Append two arguments, typically a flag and its value."""
        self.args.extend([os.fspath(first), os.fspath(second)])
        return self

    def add_args(self, args: Iterable[StrPath]) -> "Command":
        """Append each of ``args`` in order."""
        self.args.extend(os.fspath(arg) for arg in args)
        return self

    def enable_capture(self) -> "Command":
        """Capture stdout and stderr instead of inheriting them."""
        self.capture = True
        return self

    @property
    def argv(self) -> list[str]:
        """The full argument vector, program first."""
        return [self.program, *self.args]

    def command_line(self) -> str:
        """Render the argument vector as a shell-quoted string."""
        return shlex.join(self.argv)

    def __str__(self) -> str:
        return self.command_line()

    def _build_env(self) -> dict[str, str] | None:
        if not self.env and not self.clear_env:
            return None
        env = {} if self.clear_env else dict(os.environ)
        env.update(self.env)
        return env

    def _stdio(self, pipe: int, stdout_redirect: int) -> tuple[int | None, int | None]:
        stdout = pipe if self.capture else None
        if self.combine_output:
            stderr: int | None = stdout_redirect
        else:
            stderr = pipe if self.capture else None
        return stdout, stderr

    def _finish(self, returncode: int, stdout: bytes | None, stderr: bytes | None) -> CommandOutput:
        output = CommandOutput(
            args=self.argv,
            returncode=returncode,
            stdout=stdout or b"",
            stderr=stderr or b"",
        )
        if self.check and not output.success:
            logger.warning(f"Command exited with status {returncode}: {self.command_line()}")
            raise CommandExitError(
                command=self.command_line(),
                returncode=returncode,
                stderr=output.stderr_string_lossy(),
            )
        return output

    def run(self, timeout: float | None = None) -> CommandOutput:
        """Run the command and wait for it to exit.

        Args:
            timeout: Seconds to wait before killing the child (default: no limit)

        Returns:
            CommandOutput with the exit status and any captured output

        Raises:
            CommandSpawnError: If the process could not be started
            CommandTimeoutError: If the timeout expired
            CommandExitError: If ``check`` is set and the exit status is non-zero
        """
        command_line = self.command_line()
        if self.log_command:
            logger.info(f"Running: {command_line}")

        stdout, stderr = self._stdio(subprocess.PIPE, subprocess.STDOUT)
        try:
            proc = subprocess.run(
                self.argv,
                cwd=self.cwd,
                env=self._build_env(),
                stdout=stdout,
                stderr=stderr,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandTimeoutError(command_line, timeout or 0.0) from e
        except OSError as e:
            raise CommandSpawnError(command_line, e) from e

        return self._finish(proc.returncode, proc.stdout, proc.stderr)

    async def run_async(self, timeout: float | None = None) -> CommandOutput:
        """Run the command as an asyncio subprocess.

        Same semantics and exceptions as ``run()``.
        """
        command_line = self.command_line()
        if self.log_command:
            logger.info(f"Running: {command_line}")

        stdout, stderr = self._stdio(asyncio.subprocess.PIPE, asyncio.subprocess.STDOUT)
        try:
            proc = await asyncio.create_subprocess_exec(
                *self.argv,
                cwd=self.cwd,
                env=self._build_env(),
                stdout=stdout,
                stderr=stderr,
            )
        except OSError as e:
            raise CommandSpawnError(command_line, e) from e

        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(
                proc.communicate(),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise CommandTimeoutError(command_line, timeout or 0.0) from e

        return self._finish(proc.returncode or 0, stdout_bytes, stderr_bytes)
