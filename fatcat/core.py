import sys
import logging
from pathlib import Path
from typing import Optional, TextIO

from . import config
from . import display
from .models import ReportView
from .reporting import build_report, write_log
from .scanning.engine import ScanEngine, check_root
from .sizes import megabytes_to_bytes


class FatcatApp:
    def __init__(self,
                 max_workers: int = config.DEFAULT_MAX_WORKERS,
                 show_progress: bool = True,
                 out: Optional[TextIO] = None):
        self.engine = ScanEngine(max_workers=max_workers, show_progress=show_progress)
        self.out = out or sys.stdout

    def run(self,
            path: str = config.DEFAULT_PATH,
            min_size_mb: int = config.DEFAULT_MIN_SIZE_MB,
            top_n: int = config.DEFAULT_TOP_N,
            verbose: bool = False,
            output: Optional[Path] = None) -> ReportView:
        """
        Full pipeline:
        1. Check the target
        2. Scan & Rank
        3. Print summary (+ statistics when verbose) and the top-N files
        4. Persist the full report when an output path is given

        Raises:
            ScanRootError: target missing or unreadable (nothing is scanned)
            ReportWriteError: the log could not be written (console output is complete)
        """
        check_root(path)
        min_size_bytes = megabytes_to_bytes(min_size_mb)

        display.emit(display.render_banner() + display.render_target(path, min_size_mb), self.out)

        logging.info(f"Scanning {path} for files >= {min_size_mb} MB...")
        result, counters = self.engine.scan(path, min_size_bytes)
        report = build_report(result, counters, top_n)

        lines = display.render_summary(report)
        if verbose:
            lines += display.render_statistics(report)
        lines += display.render_top_files(report)
        display.emit(lines, self.out)

        if output is not None:
            write_log(report, output)
            display.emit(display.render_log_saved(output), self.out)

        return report
