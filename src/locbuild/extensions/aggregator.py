"""Aggregate extension translation sources into one XLF file per extension.

Extension folders arrive from an upstream enumeration and are processed
concurrently, one task per extension. Output is a single async stream of
XLF files. The stream ends only when the enumeration has finished and
every per-extension task has completed; CompletionBarrier tracks both
conditions and signals completion exactly once.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
import posixpath
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable
from typing import cast

from locbuild.artifacts import OutputFile
from locbuild.config import BuildConfig
from locbuild.constants import EXTENSIONS_PROJECT
from locbuild.extensions.sources import collect_extension_l10n, read_extension_id
from locbuild.loading import FileProvider
from locbuild.xliff.l10n import build_l10n_xlf

__all__ = [
    "CompletionBarrier",
    "create_xlf_file_for_extension",
    "create_xlf_files_for_extensions",
]

logger = logging.getLogger(__name__)

_SKIPPED_FOLDERS = frozenset({"node_modules"})


class CompletionBarrier:
    """Fan-in barrier over a growing set of pending operations.

    Completion requires both that upstream has finished producing work
    and that no operation is still running. The completion callback and
    event fire exactly once.

    Example:
        >>> barrier = CompletionBarrier()
        >>> barrier.enter()
        >>> barrier.finish_upstream()
        >>> barrier.done
        False
        >>> barrier.leave()
        >>> barrier.done
        True
    """

    __slots__ = ("_done", "_on_complete", "_pending", "_upstream_finished")

    def __init__(self, on_complete: Callable[[], None] | None = None) -> None:
        self._pending = 0
        self._upstream_finished = False
        self._done = asyncio.Event()
        self._on_complete = on_complete

    @property
    def pending(self) -> int:
        """Number of operations still running."""
        return self._pending

    @property
    def done(self) -> bool:
        """Check if completion has been signaled."""
        return self._done.is_set()

    def enter(self) -> None:
        """Register a new pending operation.

        Raises:
            RuntimeError: If upstream already finished
        """
        if self._upstream_finished:
            msg = "Cannot start an operation after upstream finished"
            raise RuntimeError(msg)
        self._pending += 1

    def leave(self) -> None:
        """Mark one pending operation as completed.

        Raises:
            RuntimeError: If no operation is pending
        """
        if self._pending == 0:
            msg = "leave() called without a matching enter()"
            raise RuntimeError(msg)
        self._pending -= 1
        self._check()

    def finish_upstream(self) -> None:
        """Record that no further operations will be registered."""
        self._upstream_finished = True
        self._check()

    async def wait(self) -> None:
        """Wait until completion is signaled."""
        await self._done.wait()

    def _check(self) -> None:
        if self._pending == 0 and self._upstream_finished and not self._done.is_set():
            self._done.set()
            if self._on_complete is not None:
                self._on_complete()


def create_xlf_file_for_extension(
    folder: str,
    provider: FileProvider,
    config: BuildConfig,
) -> OutputFile | None:
    """Build the XLF file of one extension folder.

    Returns:
        ``vscode-extensions/<id>.xlf``, or None if the extension has no translatable entries
    """
    extension_id = read_extension_id(provider, folder)
    folder_name = posixpath.basename(folder.rstrip("/"))
    l10n_map = collect_extension_l10n(extension_id, folder_name, provider, config)
    if not l10n_map:
        logger.debug("No translatable entries in %s", extension_id)
        return None
    logger.info("Exporting %d resources of %s", len(l10n_map), extension_id)
    path = f"{EXTENSIONS_PROJECT}/{extension_id}.xlf"
    return OutputFile.from_text(path, build_l10n_xlf(l10n_map))


async def _iterate(folders: AsyncIterable[str] | Iterable[str]) -> AsyncIterator[str]:
    if isinstance(folders, AsyncIterable):
        async for folder in folders:
            yield folder
    else:
        for folder in folders:
            yield folder


async def create_xlf_files_for_extensions(
    folders: AsyncIterable[str] | Iterable[str],
    provider: FileProvider,
    config: BuildConfig | None = None,
) -> AsyncIterator[OutputFile]:
    """Stream one XLF file per extension with translatable entries.

    Folders that are not directories, and ``node_modules``, are ignored.
    Files are yielded as their extension finishes, so order follows
    completion rather than enumeration.

    Args:
        folders: Extension folder paths (sync or async iterable)
        provider: File access
        config: Build configuration (defaults to BuildConfig())

    Yields:
        XLF output files

    Raises:
        Exception: The first failure of the enumeration or of any extension;
            remaining extension tasks are cancelled.
    """
    config = config if config is not None else BuildConfig()
    finished = object()
    queue: asyncio.Queue[object] = asyncio.Queue()
    barrier = CompletionBarrier(on_complete=lambda: queue.put_nowait(finished))
    tasks: set[asyncio.Task[None]] = set()

    async def process(folder: str) -> None:
        try:
            output = await asyncio.to_thread(
                create_xlf_file_for_extension, folder, provider, config
            )
            if output is not None:
                queue.put_nowait(output)
        except Exception as e:  # noqa: BLE001 - forwarded to the consumer and re-raised there
            queue.put_nowait(e)
        finally:
            barrier.leave()

    async def enumerate_folders() -> None:
        try:
            async for folder in _iterate(folders):
                folder_name = posixpath.basename(folder.rstrip("/"))
                if folder_name in _SKIPPED_FOLDERS or not provider.is_dir(folder):
                    continue
                barrier.enter()
                task = asyncio.create_task(process(folder))
                tasks.add(task)
                task.add_done_callback(tasks.discard)
        except Exception as e:  # noqa: BLE001 - forwarded to the consumer and re-raised there
            queue.put_nowait(e)
        finally:
            barrier.finish_upstream()

    producer = asyncio.create_task(enumerate_folders())
    try:
        while True:
            item = await queue.get()
            if item is finished:
                break
            if isinstance(item, Exception):
                raise item
            yield cast(OutputFile, item)
    finally:
        pending = [producer, *tasks]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
