"""CLI entry point for openapi-adf."""

import logging
import sys
from pathlib import Path

import click

from openapi_adf.converter.base import ConversionError
from openapi_adf.converter.registry import available_formats, get_converter
from openapi_adf.parser.swagger import DocumentError, parse_openapi


@click.group()
def main():
    """OpenAPI ADF: convert OpenAPI/Swagger documents into Confluence pages."""
    pass


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path (stdout when omitted or '-').")
@click.option("--format", "fmt", default="confluence", type=click.Choice(available_formats()), help="Output format.")
@click.option("-v", "--verbose", is_flag=True, help="Log conversion details to stderr.")
def convert(doc_path: Path, output: Path | None, fmt: str, verbose: bool):
    """Convert an OpenAPI document into the selected output format."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    to_stdout = output is None or str(output) == "-"

    try:
        doc = parse_openapi(doc_path)
    except DocumentError as e:
        raise click.ClickException(str(e))

    endpoint_count = sum(len(p.operations) for p in doc.paths)
    click.echo(f"Parsed {doc_path}: {endpoint_count} endpoints, {len(doc.components)} components.", err=to_stdout)

    converter = get_converter(fmt)
    try:
        if to_stdout:
            converter.convert(doc, sys.stdout)
        else:
            output.parent.mkdir(parents=True, exist_ok=True)
            with output.open("w", encoding="utf-8") as fh:
                converter.convert(doc, fh)
    except (ConversionError, OSError) as e:
        raise click.ClickException(str(e))

    if not to_stdout:
        click.echo(f"{fmt} document saved to {output}")


@main.command()
def formats():
    """List the available output formats."""
    for fmt in available_formats():
        click.echo(fmt)
