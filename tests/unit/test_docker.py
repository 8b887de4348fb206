"""Tests for the Docker and Podman command builders."""

from pathlib import Path

import pytest

from docker_command.docker import Docker
from docker_command.models.client import ContainerClient
from docker_command.models.options import (
    BuildOpt,
    CreateNetworkOpt,
    RunOpt,
    UserAndGroup,
    Volume,
)
from docker_command.podman import Podman


class TestBaseCommand:
    """Tests for the base client command."""

    def test_command(self):
        """Test program and sudo variations."""
        docker = Docker()
        assert docker.command().command_line() == "docker"

        docker.sudo = True
        assert docker.command().command_line() == "sudo docker"

        docker.program = "myCommand"
        assert docker.command().command_line() == "sudo myCommand"

    def test_program_path(self):
        """Test a path-like program is stored as a string."""
        docker = Docker(program=Path("/usr/local/bin/docker"))
        assert docker.program == "/usr/local/bin/docker"
        assert docker.command().argv == ["/usr/local/bin/docker"]

    def test_podman(self):
        """Test the Podman builder."""
        podman = Podman()
        assert podman.client_type == ContainerClient.PODMAN
        assert podman.command().argv == ["podman"]
        assert podman == Docker(program="podman")

    def test_equality(self):
        """Test builders compare by program and sudo."""
        assert Docker() == Docker()
        assert Docker() != Docker(sudo=True)
        assert repr(Docker(sudo=True)) == "Docker(program='docker', sudo=True)"

    def test_hashable(self):
        """Test equal builders hash alike."""
        assert len({Docker(), Docker(), Podman(), Docker(program="podman")}) == 2
        assert {Docker(sudo=True): "sudo"}[Docker(sudo=True)] == "sudo"


class TestBuild:
    """Tests for image builds."""

    def test_build(self):
        """Test every build option."""
        cmd = Docker().build(
            BuildOpt(
                build_args={"barg1": "bval1", "barg2": "bval2"},
                context=Path("/myContext"),
                dockerfile=Path("/myContext/myDockerfile"),
                no_cache=True,
                pull=True,
                quiet=True,
                tag="myTag",
            )
        )
        assert cmd.command_line() == (
            "docker build --build-arg barg1=bval1 --build-arg barg2=bval2 "
            "--file /myContext/myDockerfile --no-cache --pull --quiet "
            "--tag myTag /myContext"
        )

    def test_build_relative_context(self):
        """Test a relative context with a trailing slash is kept."""
        cmd = Docker().build(BuildOpt(context="./app/", dockerfile="./app/Dockerfile"))
        assert cmd.args == ["build", "--file", "./app/Dockerfile", "./app/"]

    def test_build_minimal(self):
        """Test only the context is required."""
        cmd = Docker().build(BuildOpt(context="."))
        assert cmd.argv == ["docker", "build", "."]


class TestNetwork:
    """Tests for network commands."""

    def test_create_network(self):
        """Test network creation."""
        cmd = Docker().create_network(CreateNetworkOpt(name="myNetwork"))
        assert cmd.argv == ["docker", "network", "create", "myNetwork"]

    def test_remove_network(self):
        """Test network removal."""
        cmd = Podman().remove_network("myNetwork")
        assert cmd.argv == ["podman", "network", "rm", "myNetwork"]

    def test_remove_network_empty_name(self):
        """Test an empty network name is rejected."""
        with pytest.raises(ValueError):
            Docker().remove_network("")


class TestRun:
    """Tests for running containers."""

    def test_run_image_and_command(self):
        """Test an image with a command and arguments."""
        cmd = Docker().run(
            RunOpt(
                image="alpine:latest",
                command="echo",
                args=["hello", "world"],
            )
        )
        assert cmd.args == ["run", "alpine:latest", "echo", "hello", "world"]

    def test_run_image_only(self):
        """Test the image alone."""
        cmd = Docker().run(RunOpt(image="myImage"))
        assert cmd.argv == ["docker", "run", "myImage"]

    def test_run(self):
        """Test the original set of run options."""
        cmd = Docker().run(
            RunOpt(
                image="myImage",
                detach=True,
                init=True,
                name="myName",
                network="myNetwork",
                read_only=True,
                remove=True,
                user=UserAndGroup(user="myUser", group="myGroup"),
                volumes=[
                    # Read-write volume
                    Volume(src="/mySrc", dst="/myDst", read_write=True),
                    # Read-only volume with extra options
                    Volume(src="/mySrc", dst="/myDst", options=["cached", "z"]),
                ],
                command="myCmd",
                args=["arg1", "arg2"],
            )
        )
        assert cmd.command_line() == (
            "docker run --detach --init --name myName --network myNetwork "
            "--read-only --rm --user myUser:myGroup "
            "--volume /mySrc:/myDst:rw --volume /mySrc:/myDst:ro,cached,z "
            "myImage myCmd arg1 arg2"
        )

    def test_run_entrypoint_env_workdir(self):
        """Test entrypoint, environment and workdir placement."""
        cmd = Docker().run(
            RunOpt(
                image="python:3.12",
                entrypoint="/bin/sh",
                env={"B_VAR": "2", "A_VAR": "1"},
                workdir="/app",
                args=["-c", "env"],
            )
        )
        assert cmd.args == [
            "run",
            "--entrypoint",
            "/bin/sh",
            "--env",
            "B_VAR=2",
            "--env",
            "A_VAR=1",
            "--workdir",
            "/app",
            "python:3.12",
            "-c",
            "env",
        ]

    def test_run_env_value_with_spaces(self):
        """Test values are kept as single arguments and quoted when rendered."""
        cmd = Docker().run(RunOpt(image="alpine", env={"GREETING": "hello world"}))
        assert cmd.args == ["run", "--env", "GREETING=hello world", "alpine"]
        assert cmd.command_line() == "docker run --env 'GREETING=hello world' alpine"

    def test_run_relative_command_and_volume(self):
        """Test ./-prefixed commands and sources reach the client unchanged."""
        cmd = Docker().run(
            RunOpt(
                image="alpine",
                volumes=[Volume(src="./data/", dst="/data")],
                command="./entry.sh",
            )
        )
        assert cmd.args == ["run", "--volume", "./data/:/data:ro", "alpine", "./entry.sh"]

    def test_run_with_sudo(self):
        """Test sudo prefixes the whole invocation."""
        cmd = Docker(sudo=True).run(RunOpt(image="alpine", user=UserAndGroup.root()))
        assert cmd.argv == ["sudo", "docker", "run", "--user", "0:0", "alpine"]
