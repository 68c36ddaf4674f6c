"""Click CLI for docalign — check and fix JSDoc tag alignment."""

from __future__ import annotations

import difflib
import fnmatch
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from docalign.config.hierarchy import load_lint_config
from docalign.config.schema import LintConfig
from docalign.errors import ConfigError, DocAlignError
from docalign.types import AlignMode, FileDiagnostic

console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = getattr(logging, default_level, logging.WARNING)
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
        force=True,
    )


def _parse_tags(tags: str | None) -> list[str] | None:
    if tags is None:
        return None
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def _load_config(mode: str | None, tags: str | None) -> LintConfig:
    try:
        return load_lint_config(mode=mode, tags=_parse_tags(tags))
    except ConfigError as e:
        error_console.print(f"[red]Invalid configuration:[/red] {e.message}")
        sys.exit(2)


def _is_excluded(path: Path, root: Path, patterns: list[str]) -> bool:
    relative = "/" + path.relative_to(root).as_posix()
    return any(fnmatch.fnmatch(relative, pattern) for pattern in patterns)


def _collect_files(paths: tuple[str, ...], config: LintConfig) -> list[Path]:
    """Expand directories with the include/exclude globs; files pass through."""
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            files.append(path)
            continue
        for pattern in config.include:
            for candidate in sorted(path.glob(pattern)):
                if candidate.is_file() and not _is_excluded(candidate, path, config.exclude):
                    files.append(candidate)

    unique: dict[Path, None] = dict.fromkeys(files)
    return list(unique)


mode_option = click.option(
    "--mode",
    type=click.Choice([mode.value for mode in AlignMode]),
    default=None,
    help="'always' requires aligned tag columns, 'never' forbids them.",
)
tags_option = click.option(
    "--tags",
    type=str,
    default=None,
    help="Comma-separated tag names to check (default: param, returns and aliases).",
)


@click.group()
@click.version_option(package_name="docalign")
def cli() -> None:
    """docalign — JSDoc tag line alignment checker and fixer."""


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@mode_option
@tags_option
@click.option("--fix", is_flag=True, default=False, help="Rewrite files in place.")
@click.option("--diff", "show_diff", is_flag=True, default=False, help="Print fixes as a diff.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def check(
    paths: tuple[str, ...],
    mode: str | None,
    tags: str | None,
    fix: bool,
    show_diff: bool,
    verbose: int,
) -> None:
    """Check JSDoc comments in files or directories."""
    from docalign.scanner import fix_source, lint_source

    config = _load_config(mode, tags)
    _setup_logging(verbose, config.log_level)

    files = _collect_files(paths, config)
    logger.info("Checking %d file(s) in '%s' mode", len(files), config.rule.mode.value)

    problems: list[FileDiagnostic] = []
    for file in files:
        try:
            source = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            error_console.print(f"[yellow]Skipping {file}:[/yellow] {e}")
            continue

        try:
            if fix or show_diff:
                fixed = fix_source(source, config.rule, max_passes=config.max_fix_passes)
                if fixed != source:
                    if show_diff:
                        _print_diff(file, source, fixed)
                    if fix:
                        file.write_text(fixed, encoding="utf-8")
                        logger.info("Fixed %s", file)
                        source = fixed
            problems.extend(lint_source(source, config.rule, path=str(file)))
        except DocAlignError as e:
            error_console.print(f"[red]Error in {file}:[/red] {e.message}")
            sys.exit(2)

    if problems:
        _print_problems(problems)
        sys.exit(1)
    console.print(f"[green]No alignment problems in {len(files)} file(s).[/green]")


@cli.command("format")
@mode_option
@tags_option
def format_stdin(mode: str | None, tags: str | None) -> None:
    """Read source from stdin and write it back with fixes applied."""
    from docalign.scanner import fix_source

    config = _load_config(mode, tags)
    source = click.get_text_stream("stdin").read()
    click.echo(fix_source(source, config.rule, max_passes=config.max_fix_passes), nl=False)


@cli.command("show-config")
@mode_option
@tags_option
def show_config(mode: str | None, tags: str | None) -> None:
    """Show the resolved configuration."""
    config = _load_config(mode, tags)

    table = Table(title="Resolved Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("mode", config.rule.mode.value)
    table.add_row("tags", ", ".join(config.rule.applicable_tags) or "-")
    table.add_row("indent", repr(config.rule.indent) if config.rule.indent is not None else "(from comment)")
    table.add_row("include", ", ".join(config.include))
    table.add_row("exclude", ", ".join(config.exclude) or "-")
    table.add_row("max_fix_passes", str(config.max_fix_passes))
    table.add_row("log_level", config.log_level)

    console.print(table)


def _print_problems(problems: list[FileDiagnostic]) -> None:
    table = Table(title="Alignment Problems", show_header=True)
    table.add_column("Location", style="cyan")
    table.add_column("Tag")
    table.add_column("Message")
    table.add_column("Fixable")

    for problem in problems:
        table.add_row(
            f"{problem.path}:{problem.line}",
            f"@{problem.tag}",
            problem.message,
            "yes" if problem.fixable else "no",
        )

    console.print(table)
    console.print(f"[red]{len(problems)} problem(s)[/red]")


def _print_diff(path: Path, before: str, after: str) -> None:
    diff = difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
    )
    console.print("".join(diff), markup=False, highlight=False, end="")


def main() -> None:
    """Entry point for the CLI."""
    cli()
