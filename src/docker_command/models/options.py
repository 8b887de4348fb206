"""Option models for container client subcommands.

Each model is an immutable description of one subcommand invocation. The
``Docker`` builder consumes them to produce an argument vector; none of them
talk to the client directly.
"""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

# A user or group, given either by name or by numeric ID.
NameOrId = str | int


def _path_text(value: object) -> object:
    # Strings are kept verbatim, so "./data" stays a bind mount and not a named volume.
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if isinstance(value, str) and not value:
        raise ValueError("path must not be empty")
    return value


class UserAndGroup(BaseModel):
    """User and (optionally) group to run as inside the container."""

    model_config = ConfigDict(frozen=True)

    user: NameOrId = Field(description="User name or UID")
    group: NameOrId | None = Field(default=None, description="Group name or GID")

    @classmethod
    def current(cls) -> "UserAndGroup":
        """Get a UserAndGroup with the current process UID and GID."""
        return cls(user=os.getuid(), group=os.getgid())

    @classmethod
    def root(cls) -> "UserAndGroup":
        """Get a UserAndGroup with UID and GID set to zero."""
        return cls(user=0, group=0)

    def arg(self) -> str:
        """Format as an argument.

        Returns ``<user>:<group>`` if a group is set, otherwise ``<user>``.
        """
        if self.group is None:
            return str(self.user)
        return f"{self.user}:{self.group}"


class Volume(BaseModel):
    """Volume specification used when running a container."""

    model_config = ConfigDict(frozen=True)

    src: str = Field(description="Host path (if absolute) or named volume")
    dst: str = Field(description="Absolute mount point inside the container")
    read_write: bool = Field(default=False, description="Mount read-write instead of read-only")
    options: list[str] = Field(default_factory=list, description="Extra mount options (e.g. 'z')")

    @field_validator("src", "dst", mode="before")
    @classmethod
    def check_paths(cls, value: object) -> object:
        return _path_text(value)

    def arg(self) -> str:
        """Format as an argument: ``<src>:<dst>:<rw|ro>[,<option>...]``."""
        mode = "rw" if self.read_write else "ro"
        out = f"{self.src}:{self.dst}:{mode}"
        for option in self.options:
            out += f",{option}"
        return out


class BuildOpt(BaseModel):
    """Options for building an image."""

    model_config = ConfigDict(frozen=True)

    context: str = Field(description="Build context directory")
    build_args: dict[str, str] = Field(
        default_factory=dict,
        description="Build-time variables, passed in insertion order",
    )
    # Must live inside the context. The client defaults to <context>/Dockerfile.
    dockerfile: str | None = Field(default=None, description="Dockerfile to build")
    no_cache: bool = Field(default=False, description="Do not use cache when building")
    pull: bool = Field(default=False, description="Always attempt to pull a newer base image")
    quiet: bool = Field(default=False, description="Suppress build output, print image ID")
    tag: str | None = Field(default=None, description="Name to tag the image with")

    @field_validator("context", "dockerfile", mode="before")
    @classmethod
    def check_paths(cls, value: object) -> object:
        return _path_text(value)


class CreateNetworkOpt(BaseModel):
    """Options for creating a network."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Network name")


class RunOpt(BaseModel):
    """Options for running a container."""

    model_config = ConfigDict(frozen=True)

    image: str = Field(min_length=1, description="Container image to run")

    # What to run
    entrypoint: str | None = Field(default=None, description="Override the image entrypoint")
    command: str | None = Field(default=None, description="Command to run in the container")
    args: list[str] = Field(default_factory=list, description="Arguments passed to the command")

    # Environment
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Environment variables, passed in insertion order",
    )
    workdir: str | None = Field(default=None, description="Working directory inside the container")
    user: UserAndGroup | None = Field(default=None, description="User and group to run as")

    # Container settings
    detach: bool = Field(default=False, description="Run in the background, print container ID")
    init: bool = Field(default=False, description="Run an init that forwards signals and reaps")
    name: str | None = Field(default=None, description="Name to give the container")
    network: str | None = Field(default=None, description="Network to connect to")
    read_only: bool = Field(default=False, description="Mount the root filesystem read-only")
    remove: bool = Field(default=False, description="Remove the container when it exits")
    volumes: list[Volume] = Field(default_factory=list, description="Volumes to mount")

    @field_validator("command", mode="before")
    @classmethod
    def check_command(cls, value: object) -> object:
        return _path_text(value)
