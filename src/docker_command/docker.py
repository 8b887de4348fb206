"""Docker client command builder.

This module turns option models into ``Command`` objects for the Docker CLI.
The same builder works for any Docker-compatible client (such as Podman) by
changing the program.
"""

import os
from typing import Any

from docker_command.command import Command, StrPath
from docker_command.config import ClientSettings
from docker_command.models.client import ContainerClient
from docker_command.models.options import BuildOpt, CreateNetworkOpt, RunOpt


class Docker:
    """Base container command used for building and running containers.

    Allows variations such as ``docker``, ``sudo docker`` and ``podman``.
    """

    def __init__(self, program: StrPath | None = None, sudo: bool = False):
        """Initialize the builder.

        Args:
            program: Client binary (default: this client's own name)
            sudo: Run the client through sudo
        """
        self.program = os.fspath(program) if program is not None else self.client_type.value
        self.sudo = sudo

    @property
    def client_type(self) -> ContainerClient:
        """The container client this builder targets."""
        return ContainerClient.DOCKER

    def __repr__(self) -> str:
        return f"{type(self).__name__}(program={self.program!r}, sudo={self.sudo!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Docker):
            return NotImplemented
        return (self.program, self.sudo) == (other.program, other.sudo)

    def __hash__(self) -> int:
        return hash((self.program, self.sudo))

    @classmethod
    def auto(
        cls,
        search_order: list[ContainerClient] | None = None,
        sudo: bool = False,
    ) -> "Docker | None":
        """Find a container client on PATH.

        Args:
            search_order: Clients to try, first match wins (default: docker, podman)
            sudo: Run the client through sudo

        Returns:
            A builder for the first client found, or None if none is installed
        """
        # pylint: disable=import-outside-toplevel
        from docker_command.factory import create_client, detect_client

        client = detect_client(search_order)
        if client is None:
            return None
        return create_client(client, sudo=sudo)

    @classmethod
    def for_client(cls, client: str | ContainerClient, **kwargs: Any) -> "Docker":
        """Create a builder for a named client without checking PATH.

        Keyword arguments (program, sudo) are passed to the builder.
        """
        # pylint: disable=import-outside-toplevel
        from docker_command.factory import create_client

        return create_client(client, **kwargs)

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> "Docker":
        """Create a builder from ``DOCKER_COMMAND_*`` settings.

        Raises:
            ClientNotFoundError: If no program is configured and none is on PATH
        """
        # pylint: disable=import-outside-toplevel
        from docker_command.factory import require_client

        return require_client(settings=settings)

    def command(self) -> Command:
        """Create the base ``Command`` for running the client."""
        if self.sudo:
            return Command.with_args("sudo", [self.program])
        return Command(program=self.program)

    def build(self, opt: BuildOpt) -> Command:
        """Create a ``Command`` for building an image."""
        cmd = self.command()
        cmd.add_arg("build")

        for key, value in opt.build_args.items():
            cmd.add_arg_pair("--build-arg", f"{key}={value}")

        if opt.dockerfile is not None:
            cmd.add_arg_pair("--file", opt.dockerfile)

        if opt.no_cache:
            cmd.add_arg("--no-cache")

        if opt.pull:
            cmd.add_arg("--pull")

        if opt.quiet:
            cmd.add_arg("--quiet")

        if opt.tag is not None:
            cmd.add_arg_pair("--tag", opt.tag)

        cmd.add_arg(opt.context)
        return cmd

    def create_network(self, opt: CreateNetworkOpt) -> Command:
        """Create a ``Command`` for creating a network."""
        cmd = self.command()
        cmd.add_arg_pair("network", "create")
        cmd.add_arg(opt.name)
        return cmd

    def remove_network(self, name: str) -> Command:
        """Create a ``Command`` for removing a network."""
        if not name:
            raise ValueError("network name must not be empty")
        cmd = self.command()
        cmd.add_arg_pair("network", "rm")
        cmd.add_arg(name)
        return cmd

    def run(self, opt: RunOpt) -> Command:
        """Create a ``Command`` for running a container.

        Flags are emitted in a fixed order, followed by the image, the
        optional command and its arguments.
        """
        cmd = self.command()
        cmd.add_arg("run")

        if opt.detach:
            cmd.add_arg("--detach")

        if opt.entrypoint is not None:
            cmd.add_arg_pair("--entrypoint", opt.entrypoint)

        for key, value in opt.env.items():
            cmd.add_arg_pair("--env", f"{key}={value}")

        if opt.init:
            cmd.add_arg("--init")

        if opt.name is not None:
            cmd.add_arg_pair("--name", opt.name)

        if opt.network is not None:
            cmd.add_arg_pair("--network", opt.network)

        if opt.read_only:
            cmd.add_arg("--read-only")

        if opt.remove:
            cmd.add_arg("--rm")

        if opt.user is not None:
            cmd.add_arg_pair("--user", opt.user.arg())

        for volume in opt.volumes:
            cmd.add_arg_pair("--volume", volume.arg())

        if opt.workdir is not None:
            cmd.add_arg_pair("--workdir", opt.workdir)

        # Image, then command and args
        cmd.add_arg(opt.image)
        if opt.command is not None:
            cmd.add_arg(opt.command)
        cmd.add_args(opt.args)
        return cmd
