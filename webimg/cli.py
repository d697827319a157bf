"""CLI entry point using Click."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from webimg import __version__
from webimg.models.config import Config
from webimg.models.plan import ConversionReport, ConversionResult, TargetFormat
from webimg.models.status import ConversionStatus
from webimg.snippets.templates import DEFAULT_ALT, DEFAULT_SELECTOR
from webimg.utils.errors import ConversionError, InvalidInputError, ToolMissingError
from webimg.utils.logging import setup_logging


console = Console()
err_console = Console(stderr=True, soft_wrap=True)

RULE = "=" * 73

# JPEG and WEBP back the snippets' mandatory entries; AVIF and the
# quantized PNG degrade without failing the run.
MANDATORY_TARGETS = (TargetFormat.JPEG, TargetFormat.WEBP)


@click.command()
@click.argument("input_file", required=False, metavar="<input_file.png>")
@click.option(
    "--alt",
    default=DEFAULT_ALT,
    show_default=True,
    help="Alt text for the <img> fallback",
)
@click.option(
    "--selector",
    default=DEFAULT_SELECTOR,
    show_default=True,
    help="CSS selector for the image-set() rule",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write a detailed log to this file",
)
@click.option(
    "--jsonl",
    is_flag=True,
    help="Write the log file as JSON Lines",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: WEBIMG_LOG_LEVEL or INFO)",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    input_file: str | None,
    alt: str,
    selector: str,
    log_file: Path | None,
    jsonl: bool,
    log_level: str | None,
):
    """
    webimg - convert a PNG into web-delivery variants.

    Writes a quantized PNG (when smaller), JPEG, WEBP and, if an encoder
    is available, AVIF next to the input, then prints a <picture> element
    and an image-set() CSS rule referencing them.

    The input must be an existing .png file; the extension is matched
    case-insensitively, so photo.PNG is accepted too.
    """
    config = Config()
    setup_logging(log_level or config.log_level, log_file, jsonl)

    from webimg.converter.pipeline import (
        ConversionPipeline,
        StepCompletedEvent,
        StepStartedEvent,
    )
    from webimg.converter.tools import require_tools, resolve_tools
    from webimg.planner.resolver import resolve_plan
    from webimg.planner.validator import validate_source
    from webimg.snippets.templates import (
        render_image_set,
        render_picture,
        sources_from_report,
    )

    tools = resolve_tools(config)
    try:
        require_tools(tools)
    except ToolMissingError as e:
        err_console.print(f"[red]Error: {e.tool} is required but not installed. Aborting.[/red]")
        sys.exit(1)

    if not tools.avif_available:
        err_console.print(
            "[yellow]Warning: Neither 'avifenc' nor 'convert' (ImageMagick) found. "
            "AVIF file generation will be skipped.[/yellow]"
        )

    try:
        source = validate_source(input_file)
    except InvalidInputError as e:
        click.echo(ctx.get_usage())
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    plan = resolve_plan(source)

    def on_event(event):
        if isinstance(event, StepStartedEvent):
            _print_step_started(event.target, config)
        elif isinstance(event, StepCompletedEvent):
            _print_step_completed(event.target, event.result)

    pipeline = ConversionPipeline(tools, config, event_callback=on_event)
    report = pipeline.execute(plan)

    _print_summary(report)

    try:
        _check_mandatory(report)
    except ConversionError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    sources = sources_from_report(report)

    click.echo("")
    click.echo(RULE)
    click.echo("🖼️ <picture> HTML SNIPPET")
    click.echo(RULE)
    click.echo(render_picture(sources, alt))
    click.echo("")

    click.echo("")
    click.echo(RULE)
    click.echo("✨ background-image: image-set() CSS SNIPPET (Modern Browsers)")
    click.echo(RULE)
    click.echo(render_image_set(sources, selector))
    click.echo(RULE)


def _print_step_started(target: TargetFormat | None, config: Config) -> None:
    if target == TargetFormat.OPTIMIZED_PNG:
        console.print("Optimizing PNG to 8-bit paletted...")
    elif target == TargetFormat.JPEG:
        console.print(f"\nCreating JPEG (Q={config.jpeg_quality})...")
    elif target == TargetFormat.WEBP:
        console.print(f"\nCreating WEBP (Q={config.webp_quality})...")
    elif target == TargetFormat.AVIF:
        console.print(f"\nCreating AVIF (Q={config.avif_quality})...")


def _print_step_completed(
    target: TargetFormat | None,
    result: ConversionResult | None,
) -> None:
    if result is None or target is None:
        return

    if result.status == ConversionStatus.SUCCESS:
        console.print(
            f"  [green]{target.label} created:[/green] {escape(str(result.output_path))} "
            f"({result.output_size_bytes} bytes)"
        )
    elif target == TargetFormat.OPTIMIZED_PNG:
        console.print(
            f"  [yellow]{escape(result.error_message or '')}. "
            "Using original PNG as final PNG fallback.[/yellow]"
        )
    elif result.status == ConversionStatus.SKIPPED:
        console.print(f"  [yellow]{target.label} generation skipped ({escape(result.error_message or '')}).[/yellow]")
    else:
        err_console.print(f"  [red]{target.label} failed: {escape(result.error_message or '')}[/red]")


def _print_summary(report: ConversionReport) -> None:
    table = Table(title=f"Variants of {escape(report.source_path.name)}")
    table.add_column("Format", style="bold")
    table.add_column("Status")
    table.add_column("File")
    table.add_column("Bytes", justify="right")

    table.add_row(
        "Source", "-", escape(report.source_path.name), str(report.source_size_bytes),
    )

    status_styles = {
        ConversionStatus.SUCCESS: "green",
        ConversionStatus.SKIPPED: "yellow",
        ConversionStatus.FAILED: "red",
    }
    for result in report.results:
        style = status_styles[result.status]
        table.add_row(
            result.target.label,
            f"[{style}]{result.status.value}[/{style}]",
            escape(result.output_path.name) if result.output_path else "-",
            str(result.output_size_bytes) if result.output_size_bytes else "-",
        )

    console.print()
    console.print(table)
    console.print(f"Final PNG: {escape(report.final_png_path.name)}")


def _check_mandatory(report: ConversionReport) -> None:
    """
    Raises:
        ConversionError: If a variant the snippets require was not produced
    """
    missing = [t.label for t in MANDATORY_TARGETS if not report.produced(t)]
    if missing:
        raise ConversionError(
            f"{', '.join(missing)} could not be created; snippets not generated."
        )


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
