"""Progress indication utilities using Rich library.

Progress is drawn on stderr only when it is an interactive terminal, so the
``cargo.crates`` block on stdout is never mixed with progress output. In
non-interactive runs (CI, pipes, logs) a status message is logged instead.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
    TransferSpeedColumn,
)

if TYPE_CHECKING:
    from logging import Logger

# Type alias for the yielded function
UpdateFunc = Callable[..., None]


def is_interactive_terminal() -> bool:
    """Detect if stderr is an interactive terminal.

    Returns:
        True if progress output would reach an interactive terminal.
    """
    console = Console(stderr=True)
    return console.is_terminal


@contextmanager
def progress_context(
    description: str,
    total: Optional[int] = None,
    logger: Optional["Logger"] = None,
    transient: bool = True,
) -> Iterator[UpdateFunc]:
    """Context manager for download progress with automatic TTY detection.

    In interactive terminals, displays a Rich progress bar, or a spinner when
    the size is unknown. In non-interactive mode, logs status via the
    provided logger.

    Args:
        description: Initial description text for the progress indicator.
        total: Total number of bytes expected. If None, shows a spinner.
        logger: Logger instance for non-interactive mode status messages.
        transient: If True, progress is cleared when complete (default True).

    Yields:
        update_func(advance=1, completed=None), which advances the progress
        or sets the completed amount.
    """
    if not is_interactive_terminal():
        if logger is not None:
            logger.status(f"{description}...")

        def noop_update(advance: int = 1, completed: Optional[int] = None) -> None:
            pass

        yield noop_update
        return

    if total is None:
        columns = [
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            DownloadColumn(),
            TimeElapsedColumn(),
        ]
    else:
        columns = [
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
        ]

    progress = Progress(*columns, console=Console(stderr=True), transient=transient)
    task_id: TaskID = TaskID(0)

    try:
        progress.start()
        task_id = progress.add_task(description, total=total)

        def update_func(advance: int = 1, completed: Optional[int] = None) -> None:
            """Update progress by advancing or setting completed value."""
            if completed is not None:
                progress.update(task_id, completed=completed)
            else:
                progress.update(task_id, advance=advance)

        yield update_func
    finally:
        progress.stop()


__all__ = [
    "is_interactive_terminal",
    "progress_context",
]
