#!/usr/bin/env python3
"""
fileutils - file-system utility commands

Main entry point for the fileutils CLI application.
"""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core import AuditLogger, Settings, load_settings
from modules.file_utils import (
    FileOperator,
    OperationResult,
    filter_by_prefix,
    filter_by_suffix,
    order_by_last_modified,
)


console = Console()


def get_settings(config_path: str) -> Settings:
    """Load settings, reporting a bad config as a usage error."""
    try:
        return load_settings(config_path)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--config")


def get_operator(settings: Settings) -> FileOperator:
    """Get a configured file operator instance."""
    logger = AuditLogger(log_path=settings.audit_log_path) if settings.audit_enabled else None
    return FileOperator(settings=settings, logger=logger)


def report(result: OperationResult, done: str) -> None:
    """Print the outcome of an operation and exit non-zero on failure."""
    if not result.success:
        console.print(f"[red]{result.operation} failed[/red] [dim]({result.kind.value})[/dim]: {escape(result.message or '')}")
        sys.exit(1)
    if result.dry_run:
        console.print(f"[yellow]{escape(result.message)}[/yellow]")
    else:
        console.print(f"[green]{escape(done)}[/green]")


@click.group()
@click.version_option(version="0.1.0", prog_name="fileutils")
@click.option("--config", "config_path", default="config.yaml", show_default=True,
              help="Path to the YAML config file.")
@click.option("--dry-run", is_flag=True, help="Validate and audit changes without performing them.")
@click.pass_context
def cli(ctx, config_path: str, dry_run: bool):
    """
    fileutils - simple file-system operations

    Read, write, append, copy, move, rename, truncate, delete
    and list files from the command line.
    """
    settings = get_settings(config_path)
    ctx.obj = {"settings": settings, "operator": get_operator(settings), "dry_run": dry_run}


@cli.command()
@click.argument("path")
@click.pass_obj
def exists(obj, path: str):
    """Check whether PATH exists."""
    found = obj["operator"].exists(path).data
    console.print("[green]yes[/green]" if found else "[red]no[/red]")
    sys.exit(0 if found else 1)


@cli.command()
@click.argument("path")
@click.pass_obj
def read(obj, path: str):
    """Print the contents of a file."""
    result = obj["operator"].read_file(path)
    if not result.success:
        report(result, "")
    click.echo(result.data, nl=False)


@cli.command()
@click.argument("path")
@click.pass_obj
def parse(obj, path: str):
    """Print a file line by line with line numbers."""
    result = obj["operator"].parse_file(path)
    if not result.success:
        report(result, "")
    for number, line in enumerate(result.data, start=1):
        console.print(f"[dim]{number:>5}[/dim]  {line}", highlight=False, markup=False)


@cli.command()
@click.argument("path")
@click.argument("content", required=False)
@click.pass_obj
def create(obj, path: str, content):
    """Create PATH (truncating it) with optional CONTENT."""
    result = obj["operator"].create_file(path, content, dry_run=obj["dry_run"])
    report(result, f"Created {path}")


@cli.command()
@click.argument("path")
@click.argument("lines", nargs=-1)
@click.pass_obj
def write(obj, path: str, lines):
    """Replace the contents of PATH with LINES."""
    result = obj["operator"].write_lines(path, list(lines), dry_run=obj["dry_run"])
    report(result, f"Wrote {len(lines)} line(s) to {path}")


@cli.command()
@click.argument("path")
@click.argument("lines", nargs=-1)
@click.option("--newline/--no-newline", default=False,
              help="Write a line separator before the appended text.")
@click.pass_obj
def append(obj, path: str, lines, newline: bool):
    """Append LINES to the end of PATH."""
    result = obj["operator"].append_lines(
        path, list(lines) if lines else None,
        prepend_separator=newline, dry_run=obj["dry_run"]
    )
    report(result, f"Appended {len(lines)} line(s) to {path}")


@cli.command()
@click.argument("path")
@click.argument("new_name")
@click.pass_obj
def rename(obj, path: str, new_name: str):
    """Rename PATH to NEW_NAME within its directory."""
    result = obj["operator"].rename_file(path, new_name, dry_run=obj["dry_run"])
    report(result, f"Renamed {path} -> {result.data}")


@cli.command()
@click.argument("source")
@click.argument("target")
@click.pass_obj
def move(obj, source: str, target: str):
    """Move SOURCE to TARGET, replacing TARGET."""
    result = obj["operator"].move_file(source, target, dry_run=obj["dry_run"])
    report(result, f"Moved {source} -> {target}")


@cli.command()
@click.argument("source")
@click.argument("target")
@click.pass_obj
def copy(obj, source: str, target: str):
    """Copy SOURCE to TARGET, replacing TARGET."""
    result = obj["operator"].copy_file(source, target, dry_run=obj["dry_run"])
    report(result, f"Copied {source} -> {target}")


@cli.command()
@click.argument("path")
@click.pass_obj
def truncate(obj, path: str):
    """Empty the contents of PATH."""
    result = obj["operator"].truncate_file(path, dry_run=obj["dry_run"])
    report(result, f"Truncated {path}")


@cli.command()
@click.argument("path")
@click.pass_obj
def delete(obj, path: str):
    """Delete a file or an empty directory."""
    result = obj["operator"].delete_file(path, dry_run=obj["dry_run"])
    report(result, f"Deleted {path}")


@cli.command("ls")
@click.argument("path", default=".")
@click.option("--dirs", is_flag=True, help="List entries that are not regular files.")
@click.option("--prefix", default=None, help="Only names starting with this text.")
@click.option("--suffix", default=None, help="Only names ending with this text.")
@click.option("--sort", "sort_by_date", is_flag=True, help="Order by last-modified time.")
@click.option("--desc", is_flag=True, help="Newest first (implies --sort).")
@click.pass_obj
def list_command(obj, path: str, dirs: bool, prefix, suffix, sort_by_date: bool, desc: bool):
    """List the files (or directories) directly inside PATH."""
    operator = obj["operator"]
    result = operator.list_directories(path) if dirs else operator.list_files(path)
    if not result.success:
        report(result, "")

    entries = result.data
    if prefix is not None:
        entries = filter_by_prefix(entries, prefix)
    if suffix is not None:
        entries = filter_by_suffix(entries, suffix)
    if sort_by_date or desc:
        order_by_last_modified(entries, descending=desc)

    if not entries:
        console.print("[dim]No entries found.[/dim]")
        return

    table = Table(title=f"{'Directories' if dirs else 'Files'} in {path}")
    table.add_column("Name", no_wrap=True)
    table.add_column("Size", justify="right")
    table.add_column("Modified", style="dim")

    for entry in entries:
        modified = entry.modified_at
        table.add_row(
            entry.name,
            str(entry.size) if entry.is_file else "—",
            modified.strftime("%Y-%m-%d %H:%M:%S") if modified else "—"
        )

    console.print(table)


@cli.command()
@click.option("--limit", default=20, show_default=True, help="Number of entries to show.")
@click.option("--failed", is_flag=True, help="Only show failed operations.")
@click.pass_obj
def audit(obj, limit: int, failed: bool):
    """View the audit log."""
    logger = AuditLogger(log_path=obj["settings"].audit_log_path)
    entries = logger.get_failed(limit=limit) if failed else logger.get_recent(limit=limit)

    if not entries:
        console.print("[dim]No audit entries found.[/dim]")
        return

    table = Table(title="Recent Audit Log")
    table.add_column("Time", style="dim")
    table.add_column("Operation", no_wrap=True)
    table.add_column("Target", overflow="fold")
    table.add_column("Status")

    for entry in entries:
        time_str = entry.timestamp.split("T")[1].split(".")[0] if "T" in entry.timestamp else entry.timestamp

        status_str = entry.status
        if entry.status == "executed":
            status_str = f"[green]{entry.status}[/green]"
        elif entry.status == "failed":
            status_str = f"[red]{entry.status} ({entry.error_kind})[/red]"
        elif entry.status == "dry_run":
            status_str = f"[yellow]{entry.status}[/yellow]"

        target = entry.target or "—"
        table.add_row(
            time_str,
            entry.operation,
            target[:50] + "..." if len(target) > 50 else target,
            status_str
        )

    console.print(table)


@cli.command("init-config")
@click.argument("path", default="config.yaml")
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
@click.pass_obj
def init_config(obj, path: str, force: bool):
    """Write an example config file to PATH."""
    operator = obj["operator"]
    if operator.exists(path).data and not force:
        console.print(f"[red]{path} already exists.[/red] Use --force to overwrite it.")
        sys.exit(1)

    template = operator.parse_resource("core", "config.example.yaml")
    if not template.success:
        report(template, "")

    content = obj["settings"].line_separator.join(template.data) + obj["settings"].line_separator
    result = operator.create_file(path, content, dry_run=obj["dry_run"])
    report(result, f"Wrote example config to {path}")


if __name__ == "__main__":
    cli()
