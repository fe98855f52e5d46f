"""
Console rendering: rounded boxes, banner and scan summaries.

Functions build lists of rich `Text` lines; `emit` prints them. Keeping the
two apart lets the tests check layout (`line.plain`) and styles without
capturing stdout. Colour is only emitted when the stream is a terminal.
"""
import sys
from typing import List, Optional, Sequence, TextIO

from rich.console import Console
from rich.text import Text

from . import config
from .models import ReportView
from .reporting import distribution_lines
from .sizes import format_size

STATS_COLOR = "magenta"
FILES_COLOR = "cyan"
RESULT_COLOR = "yellow"
ERROR_COLOR = "red"


def render_box(title: str,
               content: Sequence[str],
               color: Optional[str] = None,
               min_width: int = config.BOX_MIN_WIDTH) -> List[Text]:
    border = color or ""
    content_width = max([len(line) for line in content] + [min_width])
    title_str = f" {title} "
    box_width = content_width + 2

    lines = [Text.assemble(
        ("╭─", border),
        (title_str, f"bold {border}".strip()),
        ("─" * max(box_width - len(title_str) - 1, 0) + "╮", border),
    )]
    for line in content:
        lines.append(Text.assemble(
            ("│", border),
            f" {line}{' ' * (content_width - len(line))} ",
            ("│", border),
        ))
    lines.append(Text("╰" + "─" * box_width + "╯", style=border))
    return lines


def _name() -> Text:
    return Text("fatcat", style="bold cyan")


def render_banner() -> List[Text]:
    return [Text(), Text.assemble(_name(), " ", (config.VERSION, "dim")), Text()]


def render_target(path: str, min_size_mb: int) -> List[Text]:
    return [
        Text.assemble("  ", ("Target:", "dim"), " ", (path, "white"),
                      "    ", ("Min:", "dim"), " ", (str(min_size_mb), "white"), " MB"),
        Text(),
    ]


def render_summary(report: ReportView) -> List[Text]:
    return [
        Text.assemble(
            "  ", ("Done:", "green"), f" {report.result.elapsed_sec:.2f}s  ",
            ("Scanned:", "dim"), f" {report.counters.files_seen}  ",
            ("Found:", "cyan"), f" {len(report.result.files)}",
        ),
        Text(),
    ]


def render_statistics(report: ReportView) -> List[Text]:
    stats = [
        f"Dirs scanned    : {report.counters.dirs_seen}",
        f"Total size      : {format_size(report.total_size)}",
        *distribution_lines(report.distribution),
    ]
    if report.counters.skipped:
        stats.append(f"Skipped         : {report.counters.skipped}")
    return render_box("Statistics", stats, STATS_COLOR) + [Text()]


def render_top_files(report: ReportView) -> List[Text]:
    if not report.result.files:
        return render_box("Result", [config.NO_RESULTS_MESSAGE], RESULT_COLOR) + [Text()]

    file_list = [
        f"{rank:>3}. {format_size(record.size):>10}  {record.path}"
        for rank, record in report.ranked()
    ]
    return render_box(f"Top {len(report.top_files)} Files", file_list, FILES_COLOR) + [Text()]


def render_log_saved(path) -> List[Text]:
    return [Text.assemble("  ", ("Log saved:", "green"), f" {path}"), Text()]


def render_failure(message: str) -> List[Text]:
    return [Text.assemble("  ", ("Failed:", "red"), f" {message}"), Text()]


def render_error(message: str) -> List[Text]:
    return [
        Text(),
        Text.assemble("Usage: ", _name(), " ", ("[PATH] [OPTIONS]", "dim")),
        Text.assemble("Try '", ("fatcat --help", "green"), "' for help."),
        Text(),
    ] + render_box("Error", [message], ERROR_COLOR) + [Text()]


def emit(lines: Sequence[Text], stream: Optional[TextIO] = None):
    # markup/emoji off: paths such as "[old]" or ":memo:" must print verbatim
    console = Console(file=stream or sys.stdout, highlight=False, markup=False,
                      emoji=False, soft_wrap=True)
    for line in lines:
        console.print(line)
    console.file.flush()
