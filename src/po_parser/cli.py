#!/usr/bin/env python3
"""
Command line interface for the purchase order parser.
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from .detector import detect
from .parser import PurchaseOrderParser
from .pipeline import DocumentPipeline, PipelineConfig

logger = logging.getLogger(__name__)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@click.group()
@click.version_option(package_name="sfww-po-parser")
def cli():
    """SFWW purchase order parser - OCR text to spreadsheet rows."""


@cli.command()
@click.argument('text_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(), help='Output JSON file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def parse(text_file: str, output: Optional[str], verbose: bool):
    """Parse an OCR text dump and print its line items as JSON."""
    _configure_logging(verbose)

    text = Path(text_file).read_text(encoding='utf-8')
    result = PurchaseOrderParser().parse_to_json(text, output)

    if not output:
        click.echo(result)


@cli.command('detect')
@click.argument('text_file', type=click.Path(exists=True, dir_okay=False))
def detect_command(text_file: str):
    """Print which vendor grammar an OCR text dump routes to."""
    text = Path(text_file).read_text(encoding='utf-8')
    click.echo(detect(text).name)


@cli.command()
@click.argument('pdfs', nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option('--source-dir', default=None, type=click.Path(file_okay=False),
              help='Folder scanned when no PDFs are given [env: PO_PARSER_SOURCE_DIR]')
@click.option('--sheet', default=None, type=click.Path(dir_okay=False),
              help='CSV sheet the rows are appended to [env: PO_PARSER_SHEET]')
@click.option('--image-dir', default=None, type=click.Path(file_okay=False),
              help='Keep rendered page images here [env: PO_PARSER_IMAGE_DIR]')
@click.option('--dpi', default=None, type=int,
              help='Render resolution for OCR [env: PO_PARSER_DPI, default: 300]')
@click.option('--pattern', default=None,
              help='Glob for PDFs in the source folder [env: PO_PARSER_PATTERN, default: *.pdf]')
@click.option('--text-layer', is_flag=True,
              help='Use the embedded PDF text layer when present [env: PO_PARSER_TEXT_LAYER]')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def process(pdfs: Tuple[str, ...], source_dir: Optional[str], sheet: Optional[str],
            image_dir: Optional[str], dpi: Optional[int], pattern: Optional[str],
            text_layer: bool, verbose: bool):
    """Run PDFs through OCR and append their line items to the sheet."""
    _configure_logging(verbose)

    # Environment first, explicit options on top
    overrides = {
        'source_dir': source_dir,
        'sheet_path': sheet,
        'image_dir': image_dir,
        'dpi': dpi,
        'pattern': pattern,
        'use_text_layer': text_layer or None,
    }
    config = replace(
        PipelineConfig.from_env(),
        **{key: value for key, value in overrides.items() if value is not None}
    )
    results = DocumentPipeline(config).process_batch(pdfs or None)

    if not results:
        raise click.ClickException(f"No PDFs found in {config.source_dir}")

    table = Table(title="Purchase Orders")
    table.add_column("File")
    table.add_column("Outer PO")
    table.add_column("Vendor")
    table.add_column("Items", justify="right")
    table.add_column("Status")

    for result in results:
        status = "[green]ok[/green]" if result.ok else f"[red]{result.error}[/red]"
        table.add_row(result.filename, result.outer_po, result.vendor, str(len(result.items)), status)

    console.print(table)

    if any(not result.ok for result in results):
        sys.exit(1)


if __name__ == "__main__":
    cli()
