"""Exceptions raised when locating or invoking a container client."""

from typing import Any


class CommandError(Exception):
    """Base exception for container client commands."""

    def __init__(
        self,
        message: str,
        code: str = "COMMAND_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class ClientNotFoundError(CommandError):
    """No container client binary was found on the host."""

    def __init__(self, searched: list[str]):
        super().__init__(
            f"No container client found on PATH (searched: {', '.join(searched)})",
            code="CLIENT_NOT_FOUND",
            details={"searched": searched},
        )


class UnsupportedClientError(CommandError):
    """Raised when a container client is not supported."""

    def __init__(self, client: str, supported: list[str]):
        super().__init__(
            f"Container client '{client}' is not supported",
            code="UNSUPPORTED_CLIENT",
            details={"client": client, "supported": supported},
        )


class CommandSpawnError(CommandError):
    """The process could not be started (missing binary, permissions, ...)."""

    def __init__(self, command: str, error: OSError):
        super().__init__(
            f"Failed to start '{command}': {error}",
            code="COMMAND_SPAWN_ERROR",
            details={"command": command, "errno": error.errno},
        )
        self.error = error


class CommandExitError(CommandError):
    """The process exited with a non-zero status."""

    def __init__(self, command: str, returncode: int, stderr: str):
        super().__init__(
            f"Command '{command}' failed with exit code {returncode}: {stderr[:200]}",
            code="COMMAND_EXIT_ERROR",
            details={"command": command, "returncode": returncode, "stderr": stderr},
        )
        self.returncode = returncode
        self.stderr = stderr


class CommandTimeoutError(CommandError):
    """The process did not finish within the allowed time and was killed."""

    def __init__(self, command: str, timeout: float):
        super().__init__(
            f"Command '{command}' timed out after {timeout}s",
            code="COMMAND_TIMEOUT",
            details={"command": command, "timeout": timeout},
        )
