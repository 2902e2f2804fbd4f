"""Terminal helpers."""

from __future__ import annotations

import os
import subprocess


def clear_console() -> int:
    """Clear the terminal with the system's clear command; return its exit code."""
    command = "cls" if os.name == "nt" else "clear"
    return subprocess.run(command, shell=True, check=False).returncode