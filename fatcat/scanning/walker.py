import os
import logging
from concurrent.futures import ThreadPoolExecutor, wait, FIRST_COMPLETED
from pathlib import Path
from typing import Callable, Iterator, List, Optional

FILE = 'file'
DIR = 'dir'
OTHER = 'other'

ErrorCallback = Callable[[Path, OSError], None]


class WalkEntry:
    """
    One node visited during a walk.

    `kind` is 'file', 'dir' or 'other' (symlinks, sockets, devices...).
    Sizes are looked up lazily with `size()`, which raises OSError on failure.
    """
    __slots__ = ('path', 'kind', '_dir_entry')

    def __init__(self, path: Path, kind: str, dir_entry: Optional[os.DirEntry] = None):
        self.path = path
        self.kind = kind
        self._dir_entry = dir_entry

    def size(self) -> int:
        if self._dir_entry is not None:
            # DirEntry caches the stat result, so a prefetch makes this free
            return self._dir_entry.stat(follow_symlinks=False).st_size
        # Only the root is built without a DirEntry, and the root follows links
        return os.stat(self.path).st_size

    def __repr__(self):
        return f"WalkEntry({str(self.path)!r}, {self.kind!r})"


class DirectoryWalker:
    def __init__(self, max_workers: int = 1, on_error: Optional[ErrorCallback] = None):
        """
        Args:
            max_workers: Threads used to read directories. 1 walks sequentially
                         in a reproducible (name-sorted, depth-first) order.
            on_error: Called with (path, exc) for every entry or directory that
                      could not be read. The walk itself never raises OSError.
        """
        self.max_workers = max_workers
        self.on_error = on_error

    def walk(self, root) -> Iterator[WalkEntry]:
        """
        Lazily yields every entry under root, root first.
        Hidden entries are included; symlinks below the root are never followed.
        A missing root, or a root directory that cannot be listed, yields nothing.
        """
        root_path = Path(root)
        root_entry = self._root_entry(root_path)
        if root_entry is None:
            return
        if root_entry.kind != DIR:
            yield root_entry
            return

        parallel = self.max_workers > 1
        try:
            top = self._list_directory(root_path, prefetch=parallel)
        except OSError as e:
            self._report(root_path, e)
            return

        yield root_entry
        if parallel:
            yield from self._walk_parallel(top)
        else:
            yield from self._walk_sequential(top)

    def _root_entry(self, root: Path) -> Optional[WalkEntry]:
        # The root itself is resolved through links; everything below is not.
        try:
            if root.is_dir():
                return WalkEntry(root, DIR)
            if root.is_file():
                return WalkEntry(root, FILE)
            if not os.path.lexists(root):
                logging.debug(f"Scan root does not exist: {root}")
                return None
        except OSError as e:
            self._report(root, e)
            return None
        return WalkEntry(root, OTHER)

    def _walk_sequential(self, top: List[WalkEntry]) -> Iterator[WalkEntry]:
        """Depth-first walk using os.scandir, A before Z."""
        stack: List[Path] = []
        listing = top
        while True:
            subdirs = []
            for entry in listing:
                yield entry
                if entry.kind == DIR:
                    subdirs.append(entry.path)

            # Push reversed so the first subdirectory is expanded next
            stack.extend(reversed(subdirs))
            if not stack:
                return
            listing = self._read_directory(stack.pop(), prefetch=False)

    def _walk_parallel(self, top: List[WalkEntry]) -> Iterator[WalkEntry]:
        """
        Reads directories on a thread pool and merges them into one stream
        in completion order. Each worker also stats the files it lists so the
        consumer's size lookups do not serialize on the main thread.
        """
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            pending = set()
            listings = [top]
            try:
                while True:
                    for entries in listings:
                        for entry in entries:
                            if entry.kind == DIR:
                                pending.add(executor.submit(self._read_directory, entry.path, True))
                            yield entry
                    if not pending:
                        return
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    listings = [future.result() for future in done]
            finally:
                # Consumer stopped early: drop directory reads that have not started
                for future in pending:
                    future.cancel()

    def _read_directory(self, directory: Path, prefetch: bool) -> List[WalkEntry]:
        try:
            return self._list_directory(directory, prefetch)
        except OSError as e:
            self._report(directory, e)
            return []

    def _list_directory(self, directory: Path, prefetch: bool) -> List[WalkEntry]:
        """Lists one directory, sorted by name. Raises OSError if it cannot be read."""
        with os.scandir(directory) as it:
            dir_entries = list(it)

        dir_entries.sort(key=lambda e: e.name.lower())

        entries = []
        for e in dir_entries:
            path = Path(e.path)
            try:
                if e.is_dir(follow_symlinks=False):
                    kind = DIR
                elif e.is_file(follow_symlinks=False):
                    kind = FILE
                else:
                    kind = OTHER
            except OSError as exc:
                self._report(path, exc)
                continue

            if prefetch and kind == FILE:
                try:
                    e.stat(follow_symlinks=False)
                except OSError:
                    pass  # size() retries and reports the failure to the consumer

            entries.append(WalkEntry(path, kind, e))
        return entries

    def _report(self, path: Path, exc: OSError):
        logging.debug(f"Skipping unreadable entry {path}: {exc}")
        if self.on_error:
            self.on_error(path, exc)
