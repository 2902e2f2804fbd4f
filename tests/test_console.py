import os
import subprocess
from unittest import mock

from slovogrid.console import clear_console


def _expected_command():
    return "cls" if os.name == "nt" else "clear"


def test_clear_console_runs_system_command():
    done = subprocess.CompletedProcess(args=_expected_command(), returncode=0)
    with mock.patch("slovogrid.console.subprocess.run", return_value=done) as run:
        assert clear_console() == 0
    run.assert_called_once_with(_expected_command(), shell=True, check=False)


def test_clear_console_reports_failure_code():
    done = subprocess.CompletedProcess(args=_expected_command(), returncode=127)
    with mock.patch("slovogrid.console.subprocess.run", return_value=done):
        assert clear_console() == 127