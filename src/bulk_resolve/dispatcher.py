"""Runs lookups on worker threads with a fixed number of permits."""

import logging
import threading
from typing import Callable, Iterable

from bulk_resolve.output import ResultWriter
from bulk_resolve.resolver import LookupResult

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Starts one daemon thread per target, never more than ``concurrency`` at once.

    A permit is taken before the next target is read from the source, so a
    slow resolver also slows down reading of streamed input.
    """

    def __init__(
        self,
        lookup: Callable[[str], LookupResult],
        concurrency: int,
        writer: ResultWriter,
    ):
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")
        self.concurrency = concurrency
        self._lookup = lookup
        self._writer = writer
        self._permits = threading.BoundedSemaphore(concurrency)

    def run(self, targets: Iterable[str]) -> int:
        """
        Look up every target and wait for all of them to finish.

        Returns:
            Number of targets dispatched.

        Raises:
            Whatever the source raises while being read; tasks still in
            flight are abandoned.
        """
        iterator = iter(targets)
        dispatched = 0
        while True:
            self._permits.acquire()
            try:
                target = next(iterator)
            except StopIteration:
                self._permits.release()
                break
            except BaseException:
                self._permits.release()
                raise
            self._start(target, dispatched)
            dispatched += 1
        self.wait()
        logger.debug("Dispatched %d lookups", dispatched)
        return dispatched

    def wait(self) -> None:
        """Block until every running task has released its permit."""
        for _ in range(self.concurrency):
            self._permits.acquire()
        for _ in range(self.concurrency):
            self._permits.release()

    def _start(self, target: str, index: int) -> None:
        worker = threading.Thread(
            target=self._work, args=(target,), name=f"lookup-{index}", daemon=True
        )
        try:
            worker.start()
        except BaseException:
            self._permits.release()
            raise

    def _work(self, target: str) -> None:
        try:
            self._writer.write(self._lookup(target))
        except Exception:
            logger.exception("Lookup task for %s failed", target)
        finally:
            self._permits.release()
