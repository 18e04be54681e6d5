"""express-setup runtime configuration.

Settings that are not part of the user's answers: which package manager to
shell out to and how long to let it run.  Like the answers themselves, these
are a Pydantic v2 model so they are validated at construction time.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Tool-level configuration, independent of the scaffolded project."""

    package_manager: str = Field(
        default="npm", min_length=1, description="Executable used to install dependencies"
    )
    install_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds before the install is killed; None waits indefinitely",
    )

    @property
    def install_command(self) -> list[str]:
        """Argument vector for the dependency install step."""
        return [self.package_manager, "install"]

    @property
    def dev_command(self) -> str:
        """Command shown to the user for starting the dev server."""
        return f"{self.package_manager} run dev"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            EXPRESS_SETUP_PACKAGE_MANAGER, EXPRESS_SETUP_INSTALL_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPRESS_SETUP_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["EXPRESS_SETUP_PACKAGE_MANAGER"]
        if os.environ.get("EXPRESS_SETUP_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = float(os.environ["EXPRESS_SETUP_INSTALL_TIMEOUT"])
        return cls(**kwargs)
