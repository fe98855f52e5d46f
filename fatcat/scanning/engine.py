import os
import time
import logging
import threading
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from .. import config
from ..exceptions import ScanRootError
from ..models import FileRecord, ScanCounters, ScanResult
from ..sizes import format_size
from .walker import DirectoryWalker, WalkEntry, FILE, DIR


def check_root(root) -> Path:
    """
    Fails loudly for a scan target the walker would silently treat as empty.
    Returns the root as a Path.
    """
    path = Path(root)
    if not path.exists():
        raise ScanRootError(f"Path does not exist: '{root}'")
    if path.is_dir():
        if not os.access(path, os.R_OK | os.X_OK):
            raise ScanRootError(f"Permission denied: '{root}'")
    elif not os.access(path, os.R_OK):
        raise ScanRootError(f"Permission denied: '{root}'")
    return path


class ScanContext:
    """
    Mutable state of a single scan: counters and the matches collected so far.

    Every mutation takes the context lock, so producers running on several
    threads can share one context. Separate scans must use separate contexts.
    """

    def __init__(self, min_size_bytes: int):
        self.min_size_bytes = min_size_bytes
        self.counters = ScanCounters()
        self._records: List[FileRecord] = []
        self._lock = threading.Lock()

    def record_dir(self):
        with self._lock:
            self.counters.dirs_seen += 1

    def record_file(self):
        with self._lock:
            self.counters.files_seen += 1

    def record_skip(self, path: Path, exc: OSError):
        """Signature matches walker.ErrorCallback so it can be passed as on_error."""
        with self._lock:
            self.counters.skipped += 1

    def add_record(self, record: FileRecord):
        with self._lock:
            self._records.append(record)

    @property
    def matched(self) -> int:
        with self._lock:
            return len(self._records)

    def ranked(self) -> List[FileRecord]:
        """
        Matches sorted by size, largest first. The sort is stable: equal
        sizes keep the order in which they were collected.
        """
        with self._lock:
            return sorted(self._records, key=lambda r: r.size, reverse=True)


class ScanEngine:
    def __init__(self, max_workers: int = 1, show_progress: bool = False):
        """
        Args:
            max_workers: Threads for directory reads (1 = sequential walk)
            show_progress: Show a tqdm spinner with live counts on stderr
        """
        self.max_workers = max_workers
        self.show_progress = show_progress

    def scan(self, root, min_size_bytes: int) -> Tuple[ScanResult, ScanCounters]:
        """
        Walks root and collects every regular file of at least min_size_bytes.

        An unreadable or missing root is not an error here: it produces an
        empty result with zero counters. Use check_root() first to tell the two apart.
        """
        t0 = time.perf_counter()
        context = ScanContext(min_size_bytes)
        walker = DirectoryWalker(max_workers=self.max_workers, on_error=context.record_skip)

        logging.debug(f"Scanning {root} (min={format_size(min_size_bytes)}, workers={self.max_workers})")

        with tqdm(desc="Scanning", unit=" entries", leave=False,
                  disable=not self.show_progress) as progress:
            for visited, entry in enumerate(walker.walk(root), start=1):
                self.visit(context, entry)
                progress.update(1)
                if visited % config.PROGRESS_REFRESH_EVERY == 0:
                    progress.set_postfix(found=context.matched, refresh=False)

        files = context.ranked()
        result = ScanResult(
            root=str(root),
            min_size_bytes=min_size_bytes,
            files=files,
            elapsed_sec=time.perf_counter() - t0,
        )
        counters = context.counters
        logging.debug(
            f"Scan complete: {counters.files_seen} files, {counters.dirs_seen} dirs, "
            f"{len(files)} matched, {counters.skipped} skipped in {result.elapsed_sec:.2f}s"
        )
        return result, counters

    def visit(self, context: ScanContext, entry: WalkEntry) -> Optional[FileRecord]:
        """
        Applies one walk entry to the context. Safe to call from several threads
        with the same context. Returns the new FileRecord when the entry matched.
        """
        if entry.kind == DIR:
            context.record_dir()
            return None
        if entry.kind != FILE:
            return None

        context.record_file()
        try:
            size = entry.size()
        except OSError as e:
            logging.debug(f"Failed to stat {entry.path}: {e}")
            context.record_skip(entry.path, e)
            return None

        if size < context.min_size_bytes:
            return None

        record = FileRecord(path=entry.path, size=size)
        context.add_record(record)
        return record
