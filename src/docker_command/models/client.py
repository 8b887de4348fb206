"""Container client selection."""

from enum import Enum


class ContainerClient(str, Enum):
    """Supported container clients.

    The value is the name of the client binary looked up on ``PATH``.
    """

    DOCKER = "docker"
    PODMAN = "podman"
