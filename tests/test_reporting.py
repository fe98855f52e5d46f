import pytest
from datetime import datetime
from pathlib import Path
from fatcat.config import MB, GB
from fatcat.exceptions import ReportWriteError
from fatcat.models import FileRecord, ScanCounters, ScanResult, SizeDistribution
from fatcat.reporting import build_report, render_log, size_distribution, write_log
from fatcat.scanning.engine import ScanEngine


def _result(*sizes, root="/data", min_size=100 * MB):
    files = [FileRecord(path=Path(f"/data/f{i}"), size=s) for i, s in enumerate(sizes)]
    return ScanResult(root=root, min_size_bytes=min_size, files=files, elapsed_sec=1.234)


def test_report_for_example_tree(fat_tree):
    result, counters = ScanEngine().scan(fat_tree, 100 * MB)

    report = build_report(result, counters, top_n=20)

    assert [r.path.name for r in report.top_files] == ["d.bin", "c.bin", "b.bin"]
    assert report.distribution == SizeDistribution(huge=1, large=1, medium=1)
    assert report.total_size == 2 * GB + 600 * MB + 150 * MB
    assert report.counters is counters


def test_top_n_slices_without_touching_totals(fat_tree):
    result, counters = ScanEngine().scan(fat_tree, 100 * MB)

    report = build_report(result, counters, top_n=2)

    assert [r.path.name for r in report.top_files] == ["d.bin", "c.bin"]
    assert report.total_size == 2 * GB + 600 * MB + 150 * MB
    assert report.distribution.medium == 1
    # the underlying result is not truncated
    assert len(result.files) == 3


def test_top_n_zero_keeps_totals():
    report = build_report(_result(2 * GB, 200 * MB), ScanCounters(files_seen=2), top_n=0)
    assert report.top_files == []
    assert report.total_size == 2 * GB + 200 * MB
    assert report.distribution == SizeDistribution(huge=1, large=0, medium=1)


def test_top_n_larger_than_result():
    report = build_report(_result(3, 2, 1, min_size=0), ScanCounters(), top_n=100)
    assert len(report.top_files) == 3


def test_empty_result_report():
    report = build_report(_result(), ScanCounters(dirs_seen=1), top_n=20)
    assert report.top_files == []
    assert report.total_size == 0
    assert report.distribution == SizeDistribution()


def test_ranked_is_one_indexed():
    report = build_report(_result(3 * GB, 2 * GB, 1 * GB), ScanCounters(), top_n=2)
    assert [(rank, r.size) for rank, r in report.ranked()] == [(1, 3 * GB), (2, 2 * GB)]


def test_distribution_ignores_files_below_buckets():
    files = [FileRecord(Path("x"), 100_000_000), FileRecord(Path("y"), 10)]
    assert size_distribution(files) == SizeDistribution()


def test_render_log_format():
    result = _result(2 * GB, 600 * MB, 150 * MB)
    report = build_report(result, ScanCounters(files_seen=4, dirs_seen=3), top_n=1)

    text = render_log(report, timestamp=datetime(2024, 5, 6, 7, 8, 9))

    assert text.splitlines() == [
        "FATCAT - Scan Report",
        "====================",
        "",
        "Timestamp       : 2024-05-06 07:08:09",
        "Scan Target     : /data",
        "Min Size        : 100.00 MB",
        "Files Scanned   : 4",
        "Dirs Scanned    : 3",
        "Files Found     : 3",
        "Elapsed Time    : 1.23 sec",
        "",
        "Total Size      : 2.73 GB",
        "",
        "Size Distribution",
        "-----------------",
        ">= 1 GB         : 1 files",
        "500 MB - 1 GB   : 1 files",
        "100 MB - 500 MB : 1 files",
        "",
        "All Files (sorted by size)",
        "--------------------------",
        f"    1. {'2.00 GB':>12}  {Path('/data/f0')}",
        f"    2. {'600.00 MB':>12}  {Path('/data/f1')}",
        f"    3. {'150.00 MB':>12}  {Path('/data/f2')}",
    ]


def test_write_log(tmp_path):
    report = build_report(_result(2 * GB), ScanCounters(files_seen=1, dirs_seen=1), top_n=20)
    log_path = tmp_path / "result.log"

    written = write_log(report, log_path, timestamp=datetime(2024, 1, 1))

    assert written == log_path
    content = log_path.read_text(encoding="utf-8")
    assert content.startswith("FATCAT - Scan Report\n")
    assert "Files Found     : 1" in content


def test_write_log_failure_raises(tmp_path):
    report = build_report(_result(), ScanCounters(), top_n=20)
    with pytest.raises(ReportWriteError):
        write_log(report, tmp_path / "missing_dir" / "result.log")
