"""Main scaffolding orchestrator.

Takes an ``Answers`` record and generates an Express project directory:
manifest, compiler config, environment and ignore files, entry point, lint
and formatter configs, then installs dependencies with the package manager.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from jinja2 import TemplateError
from rich.markup import escape

from ..config import Settings
from ..models import Answers
from ..utils import (
    console,
    ensure_dir,
    print_error,
    print_info,
    print_success,
    print_warning,
    save_json,
    step,
)
from .entrypoint import entry_filename, entry_variant
from .installer import DependencyInstaller, InstallError
from .manifest import build_manifest
from .templates import TemplateRenderer
from .tooling import build_prettier_config, build_tsconfig, eslint_context, eslint_template


# ---------------------------------------------------------------------------
# Project layout
# ---------------------------------------------------------------------------

SCAFFOLD_FOLDERS: tuple[str, ...] = (
    "models",
    "routes",
    "middleware",
    "controllers",
    "config",
    "utils",
    "services",
    "types",
)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a generation step fails; earlier steps are not undone."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(message)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Every generated file is a pure function of ``answers``.  Steps run one
    at a time, in order, each behind a status spinner.  A failure in any
    file-writing step aborts the run with ``ScaffoldError``; a failed
    dependency install only prints manual instructions.

    Attributes:
        answers: The user's choices.
        settings: Tool configuration (package manager, install timeout).
        written: Every file written so far, in generation order.
        install_succeeded: ``None`` until the install step has run.
    """

    def __init__(
        self,
        answers: Answers,
        settings: Optional[Settings] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.answers = answers
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer()
        self.installer = DependencyInstaller(self.settings)
        self.written: list[Path] = []
        self.install_succeeded: Optional[bool] = None

    # -- Path resolution ---------------------------------------------------

    def resolve_project_path(self, cwd: str | Path | None = None) -> Path:
        base = Path(cwd) if cwd is not None else Path.cwd()
        if self.answers.is_current_dir:
            return base
        return base / self.answers.project_name

    def resolve_base_dir(self, project_path: Path) -> Path:
        if self.answers.use_src_directory:
            return project_path / "src"
        return project_path

    # -- Public API --------------------------------------------------------

    async def generate(self, cwd: str | Path | None = None) -> Path:
        """Generate the complete project.

        Args:
            cwd: Directory the project name is resolved against.  Defaults
                to the process working directory.

        Returns:
            Path to the generated project root.

        Raises:
            ScaffoldError: If creating a directory or writing a file fails.
        """
        project_path = self.resolve_project_path(cwd)
        base_dir = self.resolve_base_dir(project_path)

        # 1. Project directory
        if not self.answers.is_current_dir:
            await self._create_project_dir(project_path)

        # 2. Base directory + scaffold folders
        await self._create_folder_structure(base_dir)

        # 3. package.json
        await self._create_manifest(project_path)

        # 4. tsconfig.json
        if self.answers.is_typescript:
            await self._create_tsconfig(project_path)

        # 5. .env
        await self._create_env_file(project_path)

        # 6. .gitignore
        if self.answers.create_gitignore:
            await self._create_gitignore(project_path)

        # 7. index.ts / index.js
        await self._create_entry_point(base_dir)

        # 8. eslint.config.js
        if self.answers.use_eslint:
            await self._create_eslint_config(project_path)

        # 9. .prettierrc + .prettierignore
        if self.answers.use_prettier:
            await self._create_prettier_config(project_path)

        # 10. Dependencies
        await self._install_dependencies(project_path)

        self._print_next_steps()
        return project_path

    # -- Step wrapper ------------------------------------------------------

    @asynccontextmanager
    async def _step(
        self, name: str, description: str, success: str, failure: str
    ) -> AsyncIterator[None]:
        try:
            async with step(description, success, failure):
                yield
        except (OSError, TemplateError) as exc:
            raise ScaffoldError(name, f"{failure}: {exc}") from exc

    # -- Directory structure -----------------------------------------------

    async def _create_project_dir(self, project_path: Path) -> None:
        async with self._step(
            "project_dir",
            "Creating project directory...",
            "Project directory created",
            "Failed to create project directory",
        ):
            await ensure_dir(project_path)

    async def _create_folder_structure(self, base_dir: Path) -> None:
        async with self._step(
            "folders",
            "Creating folder structure...",
            "Folder structure created",
            "Failed to create folder structure",
        ):
            await ensure_dir(base_dir)
            for folder in SCAFFOLD_FOLDERS:
                await ensure_dir(base_dir / folder)

    # -- JSON documents ----------------------------------------------------

    async def _create_manifest(self, project_path: Path) -> None:
        async with self._step(
            "manifest",
            "Creating package.json...",
            "package.json created",
            "Failed to create package.json",
        ):
            manifest = build_manifest(self.answers, project_path)
            self.written.append(await save_json(manifest, project_path / "package.json"))

    async def _create_tsconfig(self, project_path: Path) -> None:
        async with self._step(
            "tsconfig",
            "Creating tsconfig.json...",
            "tsconfig.json created",
            "Failed to create tsconfig.json",
        ):
            tsconfig = build_tsconfig(self.answers)
            self.written.append(await save_json(tsconfig, project_path / "tsconfig.json"))

    # -- Templated files ---------------------------------------------------

    async def _create_env_file(self, project_path: Path) -> None:
        async with self._step(
            "env",
            "Creating .env file...",
            ".env file created",
            "Failed to create .env file",
        ):
            self.written.append(
                await self.renderer.render_to_file("env.j2", project_path / ".env")
            )

    async def _create_gitignore(self, project_path: Path) -> None:
        async with self._step(
            "gitignore",
            "Creating .gitignore...",
            ".gitignore created",
            "Failed to create .gitignore",
        ):
            self.written.append(
                await self.renderer.render_to_file("gitignore.j2", project_path / ".gitignore")
            )

    async def _create_entry_point(self, base_dir: Path) -> None:
        variant = entry_variant(self.answers)
        async with self._step(
            "entry_point",
            "Creating index file...",
            "index file created",
            "Failed to create index file",
        ):
            self.written.append(
                await self.renderer.render_to_file(
                    variant.template,
                    base_dir / entry_filename(self.answers),
                    variant.context(),
                )
            )

    async def _create_eslint_config(self, project_path: Path) -> None:
        async with self._step(
            "eslint",
            "Creating ESLint configuration...",
            "ESLint configuration created",
            "Failed to create ESLint configuration",
        ):
            self.written.append(
                await self.renderer.render_to_file(
                    eslint_template(self.answers),
                    project_path / "eslint.config.js",
                    eslint_context(self.answers),
                )
            )

    async def _create_prettier_config(self, project_path: Path) -> None:
        async with self._step(
            "prettier",
            "Creating Prettier configuration...",
            "Prettier configuration created",
            "Failed to create Prettier configuration",
        ):
            self.written.append(
                await save_json(build_prettier_config(), project_path / ".prettierrc")
            )
            self.written.append(
                await self.renderer.render_to_file(
                    "prettierignore.j2", project_path / ".prettierignore"
                )
            )

    # -- Dependencies ------------------------------------------------------

    async def _install_dependencies(self, project_path: Path) -> None:
        """Run the install; failure is reported but never raised."""
        display_name = escape(
            project_path.name if self.answers.is_current_dir else self.answers.project_name
        )
        # No spinner here: the package manager writes to the inherited terminal.
        print_info(f"Installing dependencies in {display_name} (this may take a minute)...")
        try:
            await self.installer.install(project_path)
        except InstallError as exc:
            self.install_succeeded = False
            print_error("✖ Failed to install dependencies")
            print_warning("\nPlease run manually:")
            if not self.answers.is_current_dir:
                print_info(f"  cd {escape(self.answers.project_name)}")
            print_info(f"  {escape(' '.join(self.installer.command))}\n")
            console.print(f"[dim]Error: {escape(str(exc))}[/dim]")
            return

        self.install_succeeded = True
        print_success("✔ Dependencies installed successfully")

    def _print_next_steps(self) -> None:
        print_success("\nProject setup complete!\n")
        console.print("[cyan]Next steps:[/cyan]")
        if not self.answers.is_current_dir:
            print_info(f"  cd {escape(self.answers.project_name)}")
        print_info(f"  {escape(self.settings.dev_command)}\n")
