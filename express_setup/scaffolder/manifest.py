"""``package.json`` generation.

``build_manifest`` is a pure function of the answer record and the resolved
project path.  Branching on the ``(language, module_system)`` pair goes
through ``DEV_RUNNERS`` so each variant is a row of data rather than a branch
of code.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..models import Answers, Language, ModuleSystem


@dataclass(frozen=True)
class DevRunner:
    """How ``npm run dev`` starts the entry point for one variant."""

    command: str
    package: str
    version: str

    def script(self, entry: str) -> str:
        return f"{self.command} {entry}"


_TSX = DevRunner(command="tsx watch", package="tsx", version="^4.19.2")
_TS_NODE_DEV = DevRunner(
    command="ts-node-dev --respawn --transpile-only",
    package="ts-node-dev",
    version="^2.0.0",
)
_NODEMON = DevRunner(command="nodemon", package="nodemon", version="^3.1.7")

DEV_RUNNERS: dict[tuple[Language, ModuleSystem], DevRunner] = {
    (Language.TYPESCRIPT, ModuleSystem.ESM): _TSX,
    (Language.TYPESCRIPT, ModuleSystem.COMMONJS): _TS_NODE_DEV,
    (Language.JAVASCRIPT, ModuleSystem.ESM): _NODEMON,
    (Language.JAVASCRIPT, ModuleSystem.COMMONJS): _NODEMON,
}

# Runtime dependencies are the same for every variant.
DEPENDENCIES: dict[str, str] = {
    "express": "^4.21.1",
    "dotenv": "^16.4.5",
    "cors": "^2.8.5",
}

TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "@types/node": "^22.9.0",
    "@types/express": "^5.0.0",
    "@types/cors": "^2.8.17",
    "typescript": "^5.7.2",
}

ESLINT_DEV_DEPENDENCIES: dict[str, str] = {
    "eslint": "^9.15.0",
    "@eslint/js": "^9.15.0",
}
TYPESCRIPT_ESLINT = ("typescript-eslint", "^8.15.0")
ESLINT_CONFIG_PRETTIER = ("eslint-config-prettier", "^9.1.0")
PRETTIER = ("prettier", "^3.3.3")

ENTRY_BASENAME = "index"
BUILD_ENTRY = f"dist/{ENTRY_BASENAME}.js"
FORMAT_GLOB = '"**/*.{ts,js,json,md}"'


def manifest_name(answers: Answers, project_path: Path) -> str:
    """Package name: the directory name when scaffolding into ``.``."""
    if answers.is_current_dir:
        return project_path.name
    return answers.project_name


def source_entry(answers: Answers) -> str:
    """Entry point path relative to the project root, e.g. ``src/index.ts``."""
    src_dir = "src/" if answers.use_src_directory else ""
    return f"{src_dir}{ENTRY_BASENAME}.{answers.source_extension}"


def build_scripts(answers: Answers) -> dict[str, str]:
    runner = DEV_RUNNERS[answers.variant]
    scripts = {
        "dev": runner.script(source_entry(answers)),
        "start": f"node {BUILD_ENTRY}",
    }
    if answers.is_typescript:
        scripts["build"] = "tsc"
    if answers.use_eslint:
        scripts["lint"] = "eslint ."
        scripts["lint:fix"] = "eslint . --fix"
    if answers.use_prettier:
        scripts["format"] = f"prettier --write {FORMAT_GLOB}"
    return scripts


def build_dev_dependencies(answers: Answers) -> dict[str, str]:
    dev: dict[str, str] = {}
    if answers.is_typescript:
        dev.update(TYPESCRIPT_DEV_DEPENDENCIES)

    runner = DEV_RUNNERS[answers.variant]
    dev[runner.package] = runner.version

    if answers.use_eslint:
        dev.update(ESLINT_DEV_DEPENDENCIES)
        if answers.is_typescript:
            dev[TYPESCRIPT_ESLINT[0]] = TYPESCRIPT_ESLINT[1]
        if answers.use_prettier:
            dev[ESLINT_CONFIG_PRETTIER[0]] = ESLINT_CONFIG_PRETTIER[1]

    if answers.use_prettier:
        dev[PRETTIER[0]] = PRETTIER[1]
    return dev


def build_manifest(answers: Answers, project_path: Path) -> dict[str, Any]:
    """Return the ``package.json`` document for *answers*.

    Keys that do not apply (``main`` under ESM) are left out entirely rather
    than written as ``null``.
    """
    manifest: dict[str, Any] = {
        "name": manifest_name(answers, project_path),
        "version": "1.0.0",
        "description": "Express application",
    }
    if not answers.is_esm:
        manifest["main"] = BUILD_ENTRY
    manifest["type"] = "module" if answers.is_esm else "commonjs"
    manifest.update(
        {
            "scripts": build_scripts(answers),
            "keywords": [],
            "author": "",
            "license": "ISC",
            "dependencies": dict(DEPENDENCIES),
            "devDependencies": build_dev_dependencies(answers),
        }
    )
    return manifest
