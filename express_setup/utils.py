"""Shared utility functions for express-setup.

Provides async command execution, JSON output, Rich-based status reporting,
and the console helpers every other module prints through.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.rule import Rule

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: Optional[float] = None,
    capture: bool = True,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits for the process however long it takes.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams, so output is shown live).

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File output
# ---------------------------------------------------------------------------


def dump_json(data: dict[str, Any]) -> str:
    """Serialise *data* the way generated JSON files are laid out on disk."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


async def save_json(data: dict[str, Any], path: str | Path) -> Path:
    """Save data as pretty-printed JSON with a trailing newline.

    The write is performed in a worker thread so the event loop stays free
    to animate the status spinner.
    """
    file_path = Path(path)
    await asyncio.to_thread(file_path.write_text, dump_json(data), "utf-8")
    return file_path


async def save_text(content: str, path: str | Path) -> Path:
    """Write *content* to *path* in a worker thread."""
    file_path = Path(path)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")
    return file_path


async def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, version: str) -> None:
    """Print the tool banner shown before the first question."""
    console.print()
    console.print(Rule(f"[bold cyan]{title}[/bold cyan]", style="cyan"))
    console.print(f"[dim]Version {version}[/dim]", justify="center")
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a plain informational line."""
    console.print(f"[white]{message}[/white]")


@asynccontextmanager
async def step(description: str, success: str, failure: str) -> AsyncIterator[None]:
    """Show a transient spinner while the wrapped block runs.

    The spinner is replaced by ``✔ success`` when the block completes, or by
    ``✖ failure`` when it raises; the exception is re-raised unchanged.

    Example::

        async with step("Creating .env file...", ".env file created",
                        "Failed to create .env file"):
            await save_text(content, path)
    """
    try:
        with console.status(f"[cyan]{description}[/cyan]", spinner="dots"):
            yield
    except Exception:
        print_error(f"✖ {failure}")
        raise
    print_success(f"✔ {success}")
