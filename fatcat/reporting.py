import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from . import config
from .exceptions import ReportWriteError
from .models import FileRecord, ReportView, ScanCounters, ScanResult, SizeDistribution
from .sizes import SizeBucket, classify_size, format_size


def size_distribution(files: Iterable[FileRecord]) -> SizeDistribution:
    """
    Counts files per bucket. Files below the smallest bucket are not counted
    anywhere; the buckets do not partition the result set.
    """
    counts = {bucket: 0 for bucket in SizeBucket}
    for record in files:
        bucket = classify_size(record.size)
        if bucket is not None:
            counts[bucket] += 1
    return SizeDistribution(
        huge=counts[SizeBucket.HUGE],
        large=counts[SizeBucket.LARGE],
        medium=counts[SizeBucket.MEDIUM],
    )


def build_report(result: ScanResult, counters: ScanCounters, top_n: int) -> ReportView:
    """
    Top-N slice for display plus totals over the FULL result set.
    top_n larger than the result simply returns everything.
    """
    return ReportView(
        result=result,
        counters=counters,
        top_files=result.files[:max(top_n, 0)],
        total_size=sum(record.size for record in result.files),
        distribution=size_distribution(result.files),
    )


def distribution_lines(distribution: SizeDistribution) -> List[str]:
    return [
        f"{SizeBucket.HUGE.value:<16}: {distribution.huge} files",
        f"{SizeBucket.LARGE.value:<16}: {distribution.large} files",
        f"{SizeBucket.MEDIUM.value:<16}: {distribution.medium} files",
    ]


def render_log(report: ReportView, timestamp: Optional[datetime] = None) -> str:
    """
    Renders the persisted scan report. Unlike the console view, the file
    list at the end contains every matched file.
    """
    timestamp = timestamp or datetime.now()
    result = report.result
    counters = report.counters

    lines = [
        config.LOG_TITLE,
        "=" * len(config.LOG_TITLE),
        "",
        f"Timestamp       : {timestamp.strftime(config.LOG_TIMESTAMP_FORMAT)}",
        f"Scan Target     : {result.root}",
        f"Min Size        : {format_size(result.min_size_bytes)}",
        f"Files Scanned   : {counters.files_seen}",
        f"Dirs Scanned    : {counters.dirs_seen}",
        f"Files Found     : {len(result.files)}",
        f"Elapsed Time    : {result.elapsed_sec:.2f} sec",
        "",
        f"Total Size      : {format_size(report.total_size)}",
        "",
        "Size Distribution",
        "-----------------",
        *distribution_lines(report.distribution),
        "",
        "All Files (sorted by size)",
        "--------------------------",
    ]
    for rank, record in report.ranked_all():
        lines.append(f"{rank:>5}. {format_size(record.size):>12}  {record.path}")

    return "\n".join(lines) + "\n"


def write_log(report: ReportView, log_path, timestamp: Optional[datetime] = None) -> Path:
    """Writes the report to log_path (UTF-8). Raises ReportWriteError on failure."""
    path = Path(log_path)
    text = render_log(report, timestamp)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise ReportWriteError(f"Cannot write log file {log_path}: {e}") from e

    logging.info(f"Report written to {path} ({len(report.result.files)} files)")
    return path
