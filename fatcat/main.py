import argparse
import logging
import sys
from pathlib import Path

from . import config
from . import display
from .core import FatcatApp
from .exceptions import ReportWriteError, ScanRootError


def setup_logging(debug: bool):
    """Diagnostics go to stderr so they never mix with the report on stdout."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: '{value}'")
    return number


def positive_int(value: str) -> int:
    number = non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError(f"must be at least 1: '{value}'")
    return number


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="fatcat",
        description="Hunt down the fat files hogging your disk space.",
        epilog="Examples: fatcat | fatcat /home | fatcat ./downloads -s 500 | fatcat -v -o result.log",
    )

    p.add_argument("path", nargs="?", default=config.DEFAULT_PATH, help="Directory to scan (default: ./)")

    p.add_argument("-s", "--size", type=non_negative_int, default=config.DEFAULT_MIN_SIZE_MB, metavar="MB",
                   help=f"Minimum file size in MB (default: {config.DEFAULT_MIN_SIZE_MB})")
    p.add_argument("-o", "--output", type=Path, default=None, metavar="FILE", help="Save results to log file")
    p.add_argument("-t", "--top", type=non_negative_int, default=config.DEFAULT_TOP_N, metavar="N",
                   help=f"Show top N files (default: {config.DEFAULT_TOP_N})")
    p.add_argument("-v", "--verbose", action="store_true", help="Show detailed statistics")

    p.add_argument("-w", "--workers", type=positive_int, default=config.DEFAULT_MAX_WORKERS, metavar="N",
                   help=f"Threads used to read directories, 1 = sequential (default: {config.DEFAULT_MAX_WORKERS})")
    p.add_argument("--no-progress", action="store_true", help="Hide the scanning spinner")
    p.add_argument("--debug", action="store_true", help="Enable debug logging on stderr")
    p.add_argument("--version", action="version", version=f"fatcat {config.VERSION}")

    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.debug)

    show_progress = not args.no_progress and sys.stderr.isatty()
    app = FatcatApp(max_workers=args.workers, show_progress=show_progress)

    try:
        app.run(
            path=args.path,
            min_size_mb=args.size,
            top_n=args.top,
            verbose=args.verbose,
            output=args.output,
        )
    except ScanRootError as e:
        logging.debug(f"Rejected scan target: {e}")
        display.emit(display.render_error(str(e)))
        sys.exit(config.EXIT_BAD_ROOT)
    except ReportWriteError as e:
        display.emit(display.render_failure(str(e)))
        sys.exit(config.EXIT_LOG_WRITE_FAILED)
    except KeyboardInterrupt:
        logging.warning("Scan cancelled by user.")
        sys.exit(config.EXIT_INTERRUPTED)

    sys.exit(config.EXIT_OK)


if __name__ == "__main__":
    main()
