"""Download manager with concurrent file-level downloads (async-only).

Fetches raw bytes (covers, page images) through ``Client.download_image``.
Files are skipped if they already exist, and written only after the whole
body has arrived. Retries live here, above the API client, which never
retries on its own.
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from tqdm import tqdm

from pycomicget.client.api import Client
from pycomicget.config import Config
from pycomicget.errors import TransportFailure
from pycomicget.http.client import create_retry_decorator

logger = logging.getLogger(__name__)


@dataclass
class DownloadTask:
    """A single download task with URL and destination."""

    url: str
    save_path: Path

    def __post_init__(self):
        if isinstance(self.save_path, str):
            self.save_path = Path(self.save_path)


class DownloadManager:
    """Runs queued raw-byte downloads concurrently with progress tracking."""

    def __init__(
        self,
        client: Client,
        config: Config,
        max_workers: Optional[int] = None,
        show_progress: bool = True,
    ):
        """Initialize download manager.

        Args:
            client: Catalog client used to fetch bytes
            config: Configuration object (retry and concurrency settings)
            max_workers: Maximum number of concurrent downloads (defaults to config)
            show_progress: Whether to show progress bar
        """
        self.client = client
        self.config = config
        self.max_workers = max_workers or config.max_concurrent_downloads
        self.show_progress = show_progress and config.show_progress
        self.tasks: List[DownloadTask] = []

    def add_task(self, task: DownloadTask):
        self.tasks.append(task)

    def add_tasks(self, tasks: List[DownloadTask]):
        self.tasks.extend(tasks)

    async def execute(
        self,
        callback: Optional[Callable[[DownloadTask, bool], None]] = None
    ) -> int:
        """Execute all queued download tasks concurrently.

        Args:
            callback: Optional callback called after each task completes
                with signature: callback(task, success)

        Returns:
            Number of successfully downloaded files
        """
        if not self.tasks:
            logger.warning("No tasks to execute")
            return 0

        successful = 0
        failed = 0

        pbar = None
        if self.show_progress:
            pbar = tqdm(total=len(self.tasks), desc="Downloading", unit="file")

        semaphore = asyncio.Semaphore(self.max_workers)

        async def download_with_semaphore(task: DownloadTask):
            async with semaphore:
                try:
                    return task, await self._download_single(task)
                except Exception as e:
                    logger.error(f"Task failed with exception: {e}")
                    return task, False

        try:
            for coro in asyncio.as_completed(
                [download_with_semaphore(task) for task in self.tasks]
            ):
                task, success = await coro
                if success:
                    successful += 1
                else:
                    failed += 1

                if callback:
                    callback(task, success)

                if pbar:
                    pbar.update(1)
                    pbar.set_postfix({"success": successful, "failed": failed})
        finally:
            if pbar:
                pbar.close()

        self.tasks = []

        logger.info(f"Download complete: {successful} successful, {failed} failed")
        return successful

    async def _download_single(self, task: DownloadTask) -> bool:
        """Download one file with tenacity retry logic.

        Returns:
            True if the file exists afterwards, False otherwise
        """
        if task.save_path.exists():
            logger.debug(f"Skipping existing file: {task.save_path}")
            return True

        task.save_path.parent.mkdir(parents=True, exist_ok=True)

        @create_retry_decorator(self.config)
        async def _fetch_with_retry() -> bytes:
            return await self.client.download_image(task.url)

        try:
            content = await _fetch_with_retry()
        except TransportFailure as e:
            logger.error(f"Failed to download {task.url} after retries: {e}")
            return False

        task.save_path.write_bytes(content)
        logger.debug(f"Downloaded: {task.url} -> {task.save_path}")
        return True

    def clear(self):
        """Clear all queued tasks."""
        self.tasks = []

    def __len__(self):
        return len(self.tasks)
