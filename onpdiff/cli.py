from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

import click

from onpdiff.diff import Diff
from onpdiff.hunk import Hunk
from onpdiff.print_diff import DiffPrinter
from onpdiff.logconfig import logging_to

log = logging.getLogger(__name__)

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as e:
        raise click.ClickException(f"{path}: not a UTF-8 text file ({e.reason})") from e


def use_color(mode: str, stdout: TextIO) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    return stdout.isatty()


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("a")
@click.argument("b")
@click.option(
    "-f",
    "--files",
    "files",
    is_flag=True,
    help="Treat A and B as paths to text files and compare them line by line.",
)
@click.option(
    "-e",
    "--only-ed",
    "only_ed",
    is_flag=True,
    help="Print the edit distance only.",
)
@click.option(
    "-U",
    "--unified",
    "unified",
    type=click.IntRange(min=0),
    default=None,
    help="Print unified hunks with <n> lines of context instead of the full edit script.",
)
@click.option(
    "--color",
    "color",
    type=click.Choice(["auto", "always", "never"]),
    default="auto",
    show_default=True,
    envvar="ONPDIFF_COLOR",
    help="Colourise the output.",
)
@click.option(
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="ONPDIFF_LOG_LEVEL",
)
@click.option(
    "--log-file",
    "log_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="ONPDIFF_LOG_FILE",
)
def cli(
    a: str,
    b: str,
    files: bool,
    only_ed: bool,
    unified: int | None,
    color: str,
    log_level: str,
    log_file: Path | None,
) -> None:
    """Compute the edit distance, LCS and shortest edit script between A and B."""
    with logging_to(log_level, log_file):
        run_diff(a, b, files, only_ed, unified, color)


def run_diff(
    a: str, b: str, files: bool, only_ed: bool, unified: int | None, color: str
) -> None:
    if files:
        for name in (a, b):
            if not Path(name).is_file():
                raise click.BadParameter(f"{name} is not a file", param_hint="A/B")
        d = Diff(read_lines(Path(a)), read_lines(Path(b)))
    else:
        d = Diff(a, b)

    if only_ed:
        d.only_ed()

    d.compose()
    log.info("edit distance between %r and %r: %d", a, b, d.edit_distance())

    stdout = sys.stdout
    printer = DiffPrinter(stdout, os.environ, color=use_color(color, stdout))

    if only_ed:
        printer.print_summary(d, with_lcs=False)
        return

    if unified is not None:
        printer.print_hunks(Hunk.filter(d.ses(), unified))
        return

    printer.print_summary(d, with_lcs=not files)
    printer.print_ses(d.ses())


if __name__ == "__main__":
    cli()
