from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class FileRecord:
    """
    A file that met the size threshold during a scan.
    """
    path: Path
    size: int


@dataclass
class ScanCounters:
    files_seen: int = 0     # every regular file, regardless of size
    dirs_seen: int = 0      # every directory, the root included
    skipped: int = 0        # unreadable directories and failed metadata lookups


@dataclass
class ScanResult:
    """
    Outcome of one scan: matching files ordered by size, largest first.
    """
    root: str
    min_size_bytes: int
    files: List[FileRecord] = field(default_factory=list)
    elapsed_sec: float = 0.0


@dataclass(frozen=True)
class SizeDistribution:
    huge: int = 0       # >= 1 GB
    large: int = 0      # 500 MB - 1 GB
    medium: int = 0     # 100 MB - 500 MB


@dataclass
class ReportView:
    result: ScanResult
    counters: ScanCounters
    top_files: List[FileRecord]
    total_size: int
    distribution: SizeDistribution

    def ranked(self) -> Iterator[Tuple[int, FileRecord]]:
        """Yields (rank, record) for the top-N slice, rank starting at 1."""
        return enumerate(self.top_files, start=1)

    def ranked_all(self) -> Iterator[Tuple[int, FileRecord]]:
        return enumerate(self.result.files, start=1)
