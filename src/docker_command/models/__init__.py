"""Value objects describing container client invocations."""

from docker_command.models.client import ContainerClient
from docker_command.models.options import (
    BuildOpt,
    CreateNetworkOpt,
    NameOrId,
    RunOpt,
    UserAndGroup,
    Volume,
)

__all__ = [
    "BuildOpt",
    "ContainerClient",
    "CreateNetworkOpt",
    "NameOrId",
    "RunOpt",
    "UserAndGroup",
    "Volume",
]
