#!/usr/bin/env python3
"""
Document pipeline: PDF -> text -> line items -> sheet rows.

Documents are processed one at a time so rows land in the sheet in the same
order as the documents.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .models import LineItem
from .parser import PurchaseOrderParser
from .detector import detect
from .pdf_extractor import DocumentTextExtractor
from .sheet_writer import SheetWriter, outer_po_from_filename

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Everything the pipeline needs to know about its surroundings."""
    source_dir: str = "."
    sheet_path: str = "purchase_orders.csv"
    image_dir: Optional[str] = None
    dpi: int = 300
    use_text_layer: bool = False
    pattern: str = "*.pdf"

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        """Build a config from PO_PARSER_* environment variables."""
        defaults = cls()
        return cls(
            source_dir=os.environ.get("PO_PARSER_SOURCE_DIR", defaults.source_dir),
            sheet_path=os.environ.get("PO_PARSER_SHEET", defaults.sheet_path),
            image_dir=os.environ.get("PO_PARSER_IMAGE_DIR") or None,
            dpi=int(os.environ.get("PO_PARSER_DPI", defaults.dpi)),
            use_text_layer=os.environ.get("PO_PARSER_TEXT_LAYER", "").lower() in ("1", "true", "yes"),
            pattern=os.environ.get("PO_PARSER_PATTERN", defaults.pattern),
        )


@dataclass
class DocumentResult:
    """Outcome of one document."""
    filename: str
    outer_po: str = ""
    vendor: str = ""
    items: List[LineItem] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DocumentPipeline:
    """Runs documents through text extraction, parsing and the sheet writer."""

    def __init__(self, config: PipelineConfig,
                 text_source: Optional[Callable[[str], str]] = None,
                 writer: Optional[SheetWriter] = None,
                 parser: Optional[PurchaseOrderParser] = None):
        self.config = config
        if text_source is None:
            extractor = DocumentTextExtractor(
                dpi=config.dpi,
                image_dir=config.image_dir,
                use_text_layer=config.use_text_layer,
            )
            text_source = extractor.extract_text
        self.text_source = text_source
        self.writer = writer or SheetWriter(config.sheet_path)
        self.parser = parser or PurchaseOrderParser()

    def discover(self) -> List[str]:
        """PDFs in the source directory, sorted by name."""
        return [str(path) for path in sorted(Path(self.config.source_dir).glob(self.config.pattern))]

    def process_document(self, pdf_path: str) -> DocumentResult:
        """Process one PDF; errors propagate to the caller."""
        filename = Path(pdf_path).name
        result = DocumentResult(filename=filename, outer_po=outer_po_from_filename(filename))
        logger.info(f"Processing {filename}")

        text = self.text_source(pdf_path)
        result.vendor = detect(text).name
        result.items = self.parser.parse(text)

        if result.items:
            self.writer.append(result.items, result.outer_po)
        else:
            logger.warning(f"No line items found in {filename}")

        return result

    def process_batch(self, paths: Optional[Iterable[str]] = None) -> List[DocumentResult]:
        """
        Process documents sequentially.

        A failing document is logged and recorded; the batch carries on.
        """
        paths = list(paths) if paths is not None else self.discover()
        logger.info(f"Processing {len(paths)} documents")

        results = []
        for pdf_path in paths:
            try:
                results.append(self.process_document(pdf_path))
            except Exception as e:
                logger.error(f"Failed to process {pdf_path}: {e}")
                results.append(DocumentResult(filename=Path(pdf_path).name,
                                              outer_po=outer_po_from_filename(pdf_path),
                                              error=str(e)))

        failed = sum(1 for result in results if not result.ok)
        logger.info(f"Batch finished: {len(results) - failed} succeeded, {failed} failed")
        return results
