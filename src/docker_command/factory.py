"""Container client detection and construction.

This module maps client types (Docker, Podman) to their builder classes and
locates installed clients on the host's PATH.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from docker_command.base import ClientNotFoundError, UnsupportedClientError
from docker_command.config import ClientSettings
from docker_command.docker import Docker
from docker_command.models.client import ContainerClient
from docker_command.podman import Podman

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Docker)

DEFAULT_SEARCH_ORDER: tuple[ContainerClient, ...] = (
    ContainerClient.DOCKER,
    ContainerClient.PODMAN,
)

# Registry of client builders
_CLIENT_REGISTRY: dict[ContainerClient, type[Docker]] = {}


def register_client(
    client: ContainerClient,
) -> Callable[[type[T]], type[T]]:
    """Decorator to register a builder class for a client.

    Usage:
        register_client(ContainerClient.PODMAN)(Podman)

        @register_client(ContainerClient.PODMAN)
        class SudoPodman(Podman):
            ...
    """

    def decorator(cls: type[T]) -> type[T]:
        _CLIENT_REGISTRY[client] = cls
        return cls

    return decorator


def _to_client(client: str | ContainerClient) -> ContainerClient:
    if isinstance(client, ContainerClient):
        return client
    try:
        return ContainerClient(client.lower())
    except ValueError:
        raise UnsupportedClientError(client, get_supported_clients())


def create_client(client: str | ContainerClient, **kwargs: Any) -> Docker:
    """Create a command builder for a client.

    Args:
        client: Client type (docker, podman)
        **kwargs: Builder arguments (program, sudo)

    Returns:
        Command builder instance

    Raises:
        UnsupportedClientError: If the client is not supported
    """
    client_enum = _to_client(client)
    builder_class = _CLIENT_REGISTRY.get(client_enum)
    if builder_class is None:
        raise UnsupportedClientError(client_enum.value, get_supported_clients())
    return builder_class(**kwargs)


def detect_client(
    search_order: list[ContainerClient] | None = None,
) -> ContainerClient | None:
    """Find the first installed client.

    Args:
        search_order: Clients to look for, first match wins (default: docker, podman)

    Returns:
        The first client whose binary is on PATH, or None
    """
    for client in search_order or DEFAULT_SEARCH_ORDER:
        path = shutil.which(client.value)
        if path:
            logger.debug(f"Found container client {client.value} at {path}")
            return client
        logger.debug(f"Container client {client.value} not found on PATH")
    return None


def require_client(settings: ClientSettings | None = None) -> Docker:
    """Get a builder for the configured or detected client.

    An explicit ``program`` setting wins over detection. A program whose
    name matches a known client gets that client's builder.

    Raises:
        ClientNotFoundError: If no program is configured and none is on PATH
    """
    settings = settings or ClientSettings()

    if settings.program:
        name = Path(settings.program).name
        builder_class = Docker
        if is_client_supported(name):
            builder_class = _CLIENT_REGISTRY[ContainerClient(name.lower())]
        return builder_class(program=settings.program, sudo=settings.sudo)

    client = detect_client(settings.search_order)
    if client is None:
        searched = [c.value for c in settings.search_order or DEFAULT_SEARCH_ORDER]
        logger.warning(f"No container client found (searched: {', '.join(searched)})")
        raise ClientNotFoundError(searched)
    return create_client(client, sudo=settings.sudo)


def get_supported_clients() -> list[str]:
    """Get list of supported client identifiers."""
    return [client.value for client in _CLIENT_REGISTRY]


def is_client_supported(client: str) -> bool:
    """Check if a client name has a registered builder."""
    try:
        return ContainerClient(client.lower()) in _CLIENT_REGISTRY
    except ValueError:
        return False


def _register_builtin_clients() -> None:
    """Register built-in client builders.

    This is called automatically when the module is imported.
    """
    register_client(ContainerClient.DOCKER)(Docker)
    register_client(ContainerClient.PODMAN)(Podman)


_register_builtin_clients()
