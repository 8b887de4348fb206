"""Client selection settings read from the environment.

Variables use the ``DOCKER_COMMAND_`` prefix:

    DOCKER_COMMAND_PROGRAM=/usr/local/bin/podman   # skip detection
    DOCKER_COMMAND_SUDO=true
    DOCKER_COMMAND_SEARCH_ORDER='["podman", "docker"]'
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docker_command.models.client import ContainerClient


class ClientSettings(BaseSettings):
    """How to locate and invoke the container client."""

    model_config = SettingsConfigDict(env_prefix="DOCKER_COMMAND_", extra="ignore")

    program: str | None = Field(
        default=None,
        description="Explicit client binary; disables auto-detection when set",
    )
    sudo: bool = Field(default=False, description="Run the client through sudo")
    search_order: list[ContainerClient] = Field(
        default_factory=lambda: [ContainerClient.DOCKER, ContainerClient.PODMAN],
        description="Clients to look for on PATH, first match wins",
    )
