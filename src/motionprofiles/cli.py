"""
Command-line interface for motionprofiles.

Builds the planning profiles for this host and shows or exports them.
"""

from pathlib import Path
from typing import Any, Optional

import click
import yaml
from rich.console import Console
from rich.table import Table

from motionprofiles import __version__
from motionprofiles.core.config import LoggingSettings, ProfileSettings
from motionprofiles.core.exceptions import MotionProfileError
from motionprofiles.core.host import HostParallelism
from motionprofiles.core.logging import configure_logging
from motionprofiles.registry import (
    STAGE_IDENTIFIERS,
    ProfileDictionary,
    build_default_profiles,
)

console = Console()


def _build(threads: Optional[int], settings_path: Optional[Path]) -> ProfileDictionary:
    settings = ProfileSettings.from_yaml(settings_path) if settings_path else ProfileSettings()
    host = None
    if threads is not None:
        # max_threads from the settings file caps --threads as it caps detection
        if settings.max_threads is not None:
            threads = min(threads, settings.max_threads)
        host = HostParallelism(threads=threads)
    return build_default_profiles(host=host, settings=settings)


def _profiles_as_dict(profiles: ProfileDictionary) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for stage in profiles.stages():
        entries = data.setdefault(stage, {})
        for name, profile in profiles.items(stage):
            entries.setdefault(name, {})[type(profile).__name__] = profile.to_dict()
    return data


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6g}"
    if isinstance(value, list):
        return ", ".join(_format_value(v) for v in value)
    if isinstance(value, dict):
        return " ".join(f"{k}={_format_value(v)}" for k, v in value.items())
    return str(value)


threads_option = click.option(
    "--threads",
    "-t",
    type=click.IntRange(min=1),
    default=None,
    help="Host threads to size parallel stages for (default: detected)",
)
settings_option = click.option(
    "--settings",
    "-s",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with profile setting overrides",
)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Minimum log level",
)
@click.option("--json-logs", is_flag=True, help="Emit JSON log lines")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write log lines to this file",
)
def main(log_level: str, json_logs: bool, log_file: Optional[Path]) -> None:
    """motionprofiles - Motion planning pipeline profile builder."""
    configure_logging(
        LoggingSettings(level=log_level.upper(), json_output=json_logs, log_file=log_file)
    )


@main.command("stages")
def stages() -> None:
    """List pipeline stage identifiers."""
    profiles = build_default_profiles(host=HostParallelism(threads=1))

    table = Table(title="Pipeline Stages")
    table.add_column("Stage", style="cyan")
    table.add_column("Profiles")

    for stage in STAGE_IDENTIFIERS:
        built = "\n".join(type(p).__name__ for _, p in profiles.items(stage))
        table.add_row(stage, built or "-")

    console.print(table)


@main.command("show")
@threads_option
@settings_option
def show(threads: Optional[int], settings_path: Optional[Path]) -> None:
    """Build all profiles and print them."""
    try:
        profiles = _build(threads, settings_path)
    except MotionProfileError as e:
        console.print(f"[red]✗[/red] Failed to build profiles: {e}")
        raise SystemExit(1)

    for stage, entries in _profiles_as_dict(profiles).items():
        for name, by_type in entries.items():
            for type_name, fields in by_type.items():
                table = Table(title=f"{stage} / {name} ({type_name})")
                table.add_column("Field", style="cyan")
                table.add_column("Value")
                for key, value in fields.items():
                    table.add_row(key, _format_value(value))
                console.print(table)


@main.command("export")
@threads_option
@settings_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write YAML to this file instead of stdout",
)
def export(threads: Optional[int], settings_path: Optional[Path], output: Optional[Path]) -> None:
    """Dump all profiles as YAML."""
    try:
        profiles = _build(threads, settings_path)
    except MotionProfileError as e:
        console.print(f"[red]✗[/red] Failed to build profiles: {e}")
        raise SystemExit(1)

    text = yaml.safe_dump(_profiles_as_dict(profiles), sort_keys=False)
    if output is None:
        click.echo(text, nl=False)
        return

    output.write_text(text)
    console.print(f"[green]✓[/green] Wrote profiles to {output}")


if __name__ == "__main__":
    main()
