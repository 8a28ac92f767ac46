"""Batched read-and-extract pipeline producing scan reports."""

from __future__ import annotations

import asyncio
import os
import time
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .analyzers import Analyzer, ComponentAnalyzer
from .constants import DEFAULT_BATCH_SIZE
from .logging import get_logger
from .models import FileFinding, Report
from .repo_scanner import iter_candidate_files, validate_root


def _batched(paths: Iterable[Path], size: int) -> Iterator[List[Path]]:
    iterator = iter(paths)
    while True:
        batch = list(islice(iterator, size))
        if not batch:
            return
        yield batch


class ComponentScanner:
    """Walks a source tree and collects component declarations per file."""

    def __init__(
        self,
        analyzer: Analyzer | None = None,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self.analyzer = analyzer or ComponentAnalyzer()
        self.batch_size = batch_size
        self.logger = get_logger("pipeline")

    def scan(self, root: str | os.PathLike[str]) -> Report:
        """Scan ``root`` and return its report. Must not be called from a running loop."""
        return asyncio.run(self.scan_async(root))

    async def scan_async(self, root: str | os.PathLike[str]) -> Report:
        root_path = validate_root(root)
        started = time.perf_counter()
        self.logger.info("Scanning %s for React components", root_path)

        findings: List[FileFinding] = []
        batches = 0
        for batch in _batched(iter_candidate_files(root_path), self.batch_size):
            findings.extend(await self._process_batch(batch))
            batches += 1

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        report = Report.from_findings(findings, elapsed_ms)
        self.logger.info(
            "Found %d components in %d files (%d batches, %dms)",
            report.total_components,
            report.files_with_components,
            batches,
            elapsed_ms,
        )
        return report

    async def _process_batch(self, batch: List[Path]) -> List[FileFinding]:
        completed: List[asyncio.Task[Optional[FileFinding]]] = []
        async with asyncio.TaskGroup() as group:
            for path in batch:
                task = group.create_task(self._process_file(path))
                task.add_done_callback(completed.append)

        # Callbacks fire in completion order.
        return [finding for task in completed if (finding := task.result()) is not None]

    async def _process_file(self, path: Path) -> Optional[FileFinding]:
        loop = asyncio.get_running_loop()
        try:
            content = await loop.run_in_executor(None, _read_text, path)
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.debug("Skipping unreadable file %s: %s", path, exc)
            return None

        names = self.analyzer.analyze(content)
        if not names:
            return None
        return FileFinding(path=str(path), names=tuple(sorted(names)))


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def scan(root: str | os.PathLike[str], *, batch_size: int = DEFAULT_BATCH_SIZE) -> Report:
    """Scan ``root`` for component declarations and return the aggregate report."""
    return ComponentScanner(batch_size=batch_size).scan(root)


__all__ = ["ComponentScanner", "scan"]
