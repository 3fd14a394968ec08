"""Tests for the engine service."""

import subprocess
from unittest.mock import patch

import pytest

from openclaw_setup.models.config import ContainerEngine
from openclaw_setup.services.engine_service import EngineService
from openclaw_setup.services.exceptions import (
    ConfigurationConflictError,
    MissingDependencyError,
    SubprocessFailureError,
)


def completed(returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout="", stderr="")


@pytest.fixture
def project_dir(tmp_path):
    (tmp_path / "Dockerfile").write_text("FROM scratch\n")
    (tmp_path / "docker-compose.yml").write_text(
        "services:\n  openclaw-gateway:\n    image: noop\n  openclaw-cli:\n    image: noop\n"
    )
    return tmp_path


class TestEngineService:
    """Test cases for EngineService."""

    @patch('openclaw_setup.utils.path_finder.shutil.which', return_value=None)
    def test_init_missing_binary(self, mock_which, project_dir):
        with pytest.raises(MissingDependencyError, match="Missing dependency: podman"):
            EngineService(ContainerEngine.PODMAN, project_dir, env={})

    @patch('openclaw_setup.services.engine_service.subprocess.run')
    @patch('openclaw_setup.utils.path_finder.shutil.which', return_value='/usr/bin/docker')
    def test_build_image(self, mock_which, mock_run, project_dir):
        mock_run.return_value = completed()

        service = EngineService(ContainerEngine.DOCKER, project_dir, env={'A': 'b'})
        service.build_image("openclaw:local", "ffmpeg build-essential")

        mock_run.assert_called_once_with(
            [
                '/usr/bin/docker', 'build',
                '--build-arg', 'OPENCLAW_DOCKER_APT_PACKAGES=ffmpeg build-essential',
                '-t', 'openclaw:local',
                '-f', 'Dockerfile',
                '.',
            ],
            cwd=project_dir,
            env={'A': 'b'},
        )

    @patch('openclaw_setup.services.engine_service.subprocess.run')
    @patch('openclaw_setup.utils.path_finder.shutil.which', return_value='/usr/bin/docker')
    def test_build_failure_keeps_exit_code(self, mock_which, mock_run, project_dir):
        mock_run.return_value = completed(returncode=17)

        service = EngineService(ContainerEngine.DOCKER, project_dir, env={})

        with pytest.raises(SubprocessFailureError) as exc_info:
            service.build_image("openclaw:local")
        assert exc_info.value.returncode == 17
        assert exc_info.value.exit_code == 17

    @patch('openclaw_setup.services.engine_service.subprocess.run')
    @patch('openclaw_setup.utils.path_finder.shutil.which', return_value='/usr/bin/podman')
    def test_compose_commands_use_both_files(self, mock_which, mock_run, project_dir):
        mock_run.return_value = completed()

        service = EngineService(ContainerEngine.PODMAN, project_dir, env={})
        service.compose_up("openclaw-gateway")
        service.compose_run("openclaw-cli", "onboard", "--no-install-daemon")

        up_command = mock_run.call_args_list[0][0][0]
        run_command = mock_run.call_args_list[1][0][0]
        prefix = ['/usr/bin/podman', 'compose', '-f', 'docker-compose.yml', '-f', 'docker-compose.extra.yml']
        assert up_command == prefix + ['up', '-d', 'openclaw-gateway']
        assert run_command == prefix + ['run', '--rm', 'openclaw-cli', 'onboard', '--no-install-daemon']

    @patch('openclaw_setup.services.engine_service.subprocess.run')
    @patch('openclaw_setup.utils.path_finder.shutil.which', return_value='/usr/bin/docker')
    def test_check_compose_failure(self, mock_which, mock_run, project_dir):
        mock_run.return_value = completed(returncode=1)

        service = EngineService(ContainerEngine.DOCKER, project_dir, env={})

        with pytest.raises(MissingDependencyError, match="docker compose is not available"):
            service.check_compose()

    @patch('openclaw_setup.utils.path_finder.shutil.which', return_value='/usr/bin/docker')
    def test_check_project_files(self, mock_which, project_dir):
        EngineService(ContainerEngine.DOCKER, project_dir, env={}).check_project_files()

    @patch('openclaw_setup.utils.path_finder.shutil.which', return_value='/usr/bin/docker')
    def test_check_project_files_missing_dockerfile(self, mock_which, project_dir):
        (project_dir / "Dockerfile").unlink()
        service = EngineService(ContainerEngine.DOCKER, project_dir, env={})

        with pytest.raises(MissingDependencyError, match="Dockerfile not found"):
            service.check_project_files()

    @patch('openclaw_setup.utils.path_finder.shutil.which', return_value='/usr/bin/docker')
    def test_check_project_files_missing_service(self, mock_which, project_dir):
        (project_dir / "docker-compose.yml").write_text("services:\n  openclaw-gateway:\n    image: noop\n")
        service = EngineService(ContainerEngine.DOCKER, project_dir, env={})

        with pytest.raises(ConfigurationConflictError, match="openclaw-cli"):
            service.check_project_files()

    @patch('openclaw_setup.utils.path_finder.shutil.which', return_value='/usr/bin/docker')
    def test_check_project_files_no_services(self, mock_which, project_dir):
        (project_dir / "docker-compose.yml").write_text("version: '3'\n")
        service = EngineService(ContainerEngine.DOCKER, project_dir, env={})

        with pytest.raises(ConfigurationConflictError, match="no services found"):
            service.check_project_files()
