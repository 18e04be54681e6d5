"""Dependency installation for the generated project.

Runs the configured package manager's ``install`` command inside the
project directory with inherited stdio, so its progress is shown live.
"""

from __future__ import annotations

from pathlib import Path

from ..config import Settings
from ..utils import run_command


class InstallError(Exception):
    """Raised when the package manager cannot be run or exits non-zero."""

    def __init__(self, command: list[str], message: str) -> None:
        self.command = command
        super().__init__(f"{' '.join(command)}: {message}")


class DependencyInstaller:
    """Shells out to ``<package_manager> install``."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @property
    def command(self) -> list[str]:
        return self.settings.install_command

    async def install(self, project_path: Path) -> None:
        """Install dependencies in *project_path*.

        Raises:
            InstallError: If the executable is missing, the install exits
                non-zero, or the configured timeout elapses.
        """
        try:
            returncode, _, stderr = await run_command(
                self.command,
                cwd=project_path,
                timeout=self.settings.install_timeout,
                capture=False,
            )
        except OSError as exc:
            raise InstallError(self.command, str(exc)) from exc

        if returncode != 0:
            raise InstallError(self.command, stderr or f"exited with status {returncode}")
