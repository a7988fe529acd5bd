from subprocess import CompletedProcess
import pytest


@pytest.fixture
def editor(mocker):
    """Stands in for the editor process, which exits successfully unless the test changes ``return_value``."""
    return mocker.patch('subprocess.run', return_value=CompletedProcess(args=[], returncode=0))
