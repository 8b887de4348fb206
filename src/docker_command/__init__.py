"""Create commands for running Docker or Docker-compatible clients.

Rather than speaking to the Docker daemon, this package produces commands
that run the Docker client (or a compatible client such as Podman) in a
subprocess:

    from docker_command import Docker, RunOpt

    docker = Docker.auto()
    output = (
        docker.run(RunOpt(image="alpine:latest", command="echo", args=["hello", "world"]))
        .enable_capture()
        .run()
    )
    assert output.stdout_string_lossy() == "hello world\\n"
"""

from docker_command.base import (
    ClientNotFoundError,
    CommandError,
    CommandExitError,
    CommandSpawnError,
    CommandTimeoutError,
    UnsupportedClientError,
)
from docker_command.command import Command, CommandOutput
from docker_command.config import ClientSettings
from docker_command.docker import Docker
from docker_command.factory import (
    create_client,
    detect_client,
    get_supported_clients,
    is_client_supported,
    require_client,
)
from docker_command.models import (
    BuildOpt,
    ContainerClient,
    CreateNetworkOpt,
    NameOrId,
    RunOpt,
    UserAndGroup,
    Volume,
)
from docker_command.podman import Podman

__all__ = [
    "BuildOpt",
    "ClientNotFoundError",
    "ClientSettings",
    "Command",
    "CommandError",
    "CommandExitError",
    "CommandOutput",
    "CommandSpawnError",
    "CommandTimeoutError",
    "ContainerClient",
    "CreateNetworkOpt",
    "Docker",
    "NameOrId",
    "Podman",
    "RunOpt",
    "UnsupportedClientError",
    "UserAndGroup",
    "Volume",
    "create_client",
    "detect_client",
    "get_supported_clients",
    "is_client_supported",
    "require_client",
]
