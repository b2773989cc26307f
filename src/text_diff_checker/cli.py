from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path

import typer
import yaml

from .config import DiffConfig, load_config
from .engine import compute_diff
from .rendering import format_score, render_html, render_terminal, result_to_dict

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Text Diff Checker CLI.", no_args_is_help=True)

# Output formats understood by the compare command.
OUTPUT_FORMATS = ("text", "json", "html")


@app.command()
def compare(
    old_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True,
        help="File holding the original text.",
    ),
    new_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True,
        help="File holding the modified (typed) text.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    ignore_case: bool | None = typer.Option(
        None, "--ignore-case/--match-case", help="Override config ignore_case flag."
    ),
    ignore_punctuation: bool | None = typer.Option(
        None,
        "--ignore-punctuation/--keep-punctuation",
        help="Override config ignore_punctuation flag.",
    ),
    memoriser: bool | None = typer.Option(
        None,
        "--memoriser/--no-memoriser",
        help="Compare only as far as the modified text goes, in context windows.",
    ),
    output_format: str = typer.Option(
        "text", "--format", "-f", help="Output format: text, json or html."
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
) -> None:
    """Compare two text files and print the highlighted differences."""
    logging.basicConfig(level=log_level.upper())
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unknown format '{output_format}'; expected one of {', '.join(OUTPUT_FORMATS)}."
        )
    cfg = _apply_overrides(
        load_config(config), ignore_case, ignore_punctuation, memoriser
    )
    old_text = _read_text(old_path)
    new_text = _read_text(new_path)
    LOGGER.debug("Loaded %s and %s", old_path, new_path)

    result = compute_diff(old_text, new_text, cfg)
    if output_format == "json":
        typer.echo(json.dumps(result_to_dict(result), indent=2))
    elif output_format == "html":
        typer.echo(render_html(result.segments))
    else:
        typer.echo(render_terminal(result.segments))
        typer.echo(format_score(result.score))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = DiffConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: DiffConfig,
    ignore_case: bool | None,
    ignore_punctuation: bool | None,
    memoriser: bool | None,
) -> DiffConfig:
    """Return a copy of the config with any CLI flags applied."""
    overrides: dict[str, bool] = {}
    if ignore_case is not None:
        overrides["ignore_case"] = ignore_case
    if ignore_punctuation is not None:
        overrides["ignore_punctuation"] = ignore_punctuation
    if memoriser is not None:
        overrides["memoriser"] = memoriser
    return dc_replace(config, **overrides)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc


if __name__ == "__main__":
    main()
