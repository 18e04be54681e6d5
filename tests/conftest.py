"""Shared pytest fixtures for the express-setup test suite.

Provides reusable fixtures for:
- Answer records for every (language, module system) variant
- A patched package-manager subprocess
- A recording console for prompt output
"""

from __future__ import annotations

import io
from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from express_setup.models import Answers, Language, ModuleSystem


# ---------------------------------------------------------------------------
# Answer records
# ---------------------------------------------------------------------------

ALL_VARIANTS: list[tuple[Language, ModuleSystem]] = [
    (Language.TYPESCRIPT, ModuleSystem.ESM),
    (Language.TYPESCRIPT, ModuleSystem.COMMONJS),
    (Language.JAVASCRIPT, ModuleSystem.ESM),
    (Language.JAVASCRIPT, ModuleSystem.COMMONJS),
]


@pytest.fixture
def api_answers() -> Answers:
    """TypeScript + ESM with every option enabled."""
    return Answers(
        project_name="api",
        language=Language.TYPESCRIPT,
        module_system=ModuleSystem.ESM,
        use_src_directory=True,
        use_eslint=True,
        use_prettier=True,
        create_gitignore=True,
    )


@pytest.fixture
def minimal_answers() -> Answers:
    """JavaScript + CommonJS with every optional file disabled."""
    return Answers(
        project_name="plain",
        language=Language.JAVASCRIPT,
        module_system=ModuleSystem.COMMONJS,
        use_src_directory=False,
        use_eslint=False,
        use_prettier=False,
        create_gitignore=False,
    )


@pytest.fixture(params=ALL_VARIANTS, ids=lambda v: f"{v[0].value}-{v[1].value}")
def variant_answers(request) -> Answers:
    language, module_system = request.param
    return Answers(project_name="svc", language=language, module_system=module_system)


# ---------------------------------------------------------------------------
# Subprocess & console
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_run_command():
    """Patch the installer's subprocess call to succeed without running npm."""
    with patch(
        "express_setup.scaffolder.installer.run_command",
        new=AsyncMock(return_value=(0, "", "")),
    ) as mocked:
        yield mocked


@pytest.fixture
def failing_run_command():
    """Patch the installer's subprocess call to exit non-zero."""
    with patch(
        "express_setup.scaffolder.installer.run_command",
        new=AsyncMock(return_value=(1, "", "")),
    ) as mocked:
        yield mocked


@pytest.fixture
def record_console() -> Console:
    """A Console writing to an in-memory buffer (read via ``.file.getvalue()``)."""
    return Console(file=io.StringIO(), force_terminal=False, width=120)
