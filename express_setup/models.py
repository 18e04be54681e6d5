"""Answer record produced by the interactive collector.

The ``Answers`` model is the single input to the scaffolder.  It is frozen so
every generation step sees exactly the choices the user made, and every
computed template value is a pure function of it.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    """Source language of the generated project."""

    TYPESCRIPT = "TypeScript"
    JAVASCRIPT = "JavaScript"


class ModuleSystem(str, Enum):
    """Import/export dialect of the generated source and tooling configs."""

    ESM = "ESM"
    COMMONJS = "CommonJS"


CURRENT_DIR = "."


class Answers(BaseModel):
    """Immutable set of user choices driving project generation."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(
        default=CURRENT_DIR,
        description="Directory/package name, or '.' for the current directory",
    )
    language: Language = Field(default=Language.TYPESCRIPT)
    module_system: ModuleSystem = Field(default=ModuleSystem.ESM)
    use_src_directory: bool = Field(default=True)
    use_eslint: bool = Field(default=True)
    use_prettier: bool = Field(default=True)
    create_gitignore: bool = Field(default=True)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name cannot be empty")
        if PurePath(value).is_absolute():
            raise ValueError("Project name must be a relative path")
        return value

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def is_current_dir(self) -> bool:
        return self.project_name == CURRENT_DIR

    @property
    def is_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    @property
    def is_esm(self) -> bool:
        return self.module_system is ModuleSystem.ESM

    @property
    def source_extension(self) -> str:
        """File extension of the entry point (``ts`` or ``js``)."""
        return "ts" if self.is_typescript else "js"

    @property
    def variant(self) -> tuple[Language, ModuleSystem]:
        """Lookup key shared by every ``(language, module_system)`` table."""
        return (self.language, self.module_system)
