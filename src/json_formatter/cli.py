"""Command-line interface for the JSON Formatter."""

import asyncio
import logging
from collections import Counter
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import get_settings
from .json_formatter import JSONFormatter
from .parser import nesting_depth
from .tree_view import TreeRenderer
from .types import Operation, ProcessingError

OPERATIONS = [operation.value for operation in Operation]


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """JSON Formatter - Validate, format, minify and sort JSON documents."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["formatter"] = JSONFormatter()


def _formatter(ctx: click.Context) -> JSONFormatter:
    return ctx.obj["formatter"]


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--operation', '-p', type=click.Choice(OPERATIONS), default='format',
              help='Operation to apply (default: format)')
@click.option('--indent', '-i', type=click.IntRange(1, 8), default=None,
              help='Spaces per indentation level, 1-8 (default: 2)')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the result to a file instead of stdout')
@click.pass_context
def process(ctx: click.Context, input_file, operation: str, indent: Optional[int],
            output: Optional[Path]):
    """Apply an operation to a JSON file (or stdin)."""
    formatter = _formatter(ctx)
    content = input_file.read()
    result = asyncio.run(formatter.process_json(content, operation, indent))

    if not result.success:
        click.echo(f"❌ {operation} failed: {result.error_message}", err=True)
        ctx.exit(1)

    if output:
        output.write_text(result.result_text, encoding='utf-8')
        click.echo(f"✅ Wrote {result.processed_size} characters to {output}", err=True)
    else:
        click.echo(result.result_text)

    summary = formatter.summarize_sizes(content, result)
    click.echo(f"📊 Original: {summary['original_chars']} chars, "
               f"processed: {summary['processed_chars']} chars "
               f"({summary['change'] or 'n/a'})", err=True)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.pass_context
def validate(ctx: click.Context, input_file):
    """Validate a JSON file (or stdin) and report the error position."""
    result = asyncio.run(_formatter(ctx).validate_json(input_file.read()))

    if result.is_valid:
        click.echo("✅ Valid JSON")
        return

    location = ""
    if result.line_number is not None:
        location = f" (line {result.line_number}, column {result.column_number})"
    click.echo(f"❌ Invalid JSON{location}: {result.error_message}")
    ctx.exit(1)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def upload(ctx: click.Context, input_file: Path):
    """Check a JSON file the way uploads are checked and print it formatted."""
    # keep CRLF line endings
    content = input_file.read_bytes().decode('utf-8')
    declared_size = input_file.stat().st_size
    result = asyncio.run(_formatter(ctx).process_file_upload(input_file.name, content, declared_size))

    if not result.success:
        click.echo(f"❌ Upload rejected: {result.error_message}", err=True)
        ctx.exit(1)

    click.echo(result.result_text)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--depth', '-d', type=click.IntRange(min=0), default=None,
              help='Levels expanded by default (default: 2)')
@click.option('--expand-all', is_flag=True, help='Expand every level')
@click.pass_context
def tree(ctx: click.Context, input_file, depth: Optional[int], expand_all: bool):
    """Print a tree view of a JSON file (or stdin)."""
    formatter = _formatter(ctx)
    content = input_file.read()
    renderer = formatter.tree_renderer

    try:
        data = formatter.parser.parse(content)
    except ProcessingError as e:
        click.echo(f"Error parsing JSON: {e}", err=True)
        ctx.exit(1)

    if depth is not None:
        renderer = TreeRenderer(depth, formatter.parser, formatter.logger)
    root = renderer.build(data)
    if expand_all:
        renderer.expand_all(root)

    for line in renderer.render(root):
        click.echo(line)

    counts = Counter(node.value_type for node in renderer.walk(root))
    scalars = sum(counts.values()) - counts["object"] - counts["array"]
    click.echo(f"📊 Depth {nesting_depth(data)}, {counts['object']} objects, "
               f"{counts['array']} arrays, {scalars} values", err=True)


@main.command()
@click.option('--limit', '-n', type=click.IntRange(min=1), default=20,
              help='Number of records to show (default: 20)')
@click.pass_context
def history(ctx: click.Context, limit: int):
    """Show recorded operations, newest first."""
    formatter = _formatter(ctx)
    if not formatter.settings.history_path:
        click.echo("History is only kept across runs when JSON_FORMATTER_HISTORY_PATH is set.")

    records = asyncio.run(formatter.get_history())
    if not records:
        click.echo("No history recorded.")
        return

    for record in records[:limit]:
        status = "✅" if record.success else "❌"
        click.echo(f"{status} #{record.id} {record.created_at.isoformat()} {record.operation}: "
                   f"{record.original_size} -> {record.processed_size} chars"
                   + (f" ({record.error_message})" if record.error_message else ""))


@main.command()
@click.option('--host', default=None, help='Bind address (default: from settings)')
@click.option('--port', type=int, default=None, help='Port (default: from settings)')
def serve(host: Optional[str], port: Optional[int]):
    """Run the HTTP API server."""
    from .api import run_server

    settings = get_settings()
    overrides = {key: value for key, value in (("host", host), ("port", port)) if value is not None}
    if overrides:
        settings = settings.model_copy(update=overrides)

    click.echo(f"Serving JSON Formatter API on http://{settings.host}:{settings.port}")
    run_server(settings)


if __name__ == '__main__':
    main()
