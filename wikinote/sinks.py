# wikinote/sinks.py
"""Text sinks receiving the final formatted insert."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

logger = logging.getLogger(__name__)


class ConsoleSink:
    """Echo the insert to stdout, unstyled."""

    def __call__(self, text: str) -> None:
        typer.echo(text)


class FileSink:
    """
    Insert text into a file before the given 1-based line.
    Appends when `line` is None or past the end; creates a missing file.
    """

    def __init__(self, path: Path | str, line: Optional[int] = None) -> None:
        if line is not None and line < 1:
            raise ValueError(f"line must be >= 1, got {line}")
        self.path = Path(path)
        self.line = line

    def __call__(self, text: str) -> None:
        existing = self.path.read_text(encoding="utf-8") if self.path.exists() else ""
        lines = existing.splitlines(keepends=True)

        index = len(lines) if self.line is None else min(self.line - 1, len(lines))
        before = "".join(lines[:index])
        after = "".join(lines[index:])

        # Keep the insert on its own line(s)
        if before and not before.endswith("\n"):
            before += "\n"
        if after and not text.endswith("\n"):
            text += "\n"

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(before + text + after, encoding="utf-8")
        logger.info("Inserted %d characters into %s at line %d", len(text), self.path, index + 1)
