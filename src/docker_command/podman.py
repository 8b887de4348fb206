"""Podman client command builder.

Podman is Docker CLI-compatible, so this builder extends Docker with the
program changed to 'podman'.
"""

from docker_command.docker import Docker
from docker_command.models.client import ContainerClient


class Podman(Docker):
    """Podman command builder."""

    @property
    def client_type(self) -> ContainerClient:
        """The container client this builder targets."""
        return ContainerClient.PODMAN
