#!/usr/bin/env python3
"""
Document text source: PDF page 1 -> PNG -> OCR text.
"""

import os
import logging
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

import pdfplumber
import pytesseract
from PIL import Image

from .errors import DocumentExtractionError

logger = logging.getLogger(__name__)


class DocumentTextExtractor:
    """Renders the first page of a PDF and reads its text."""

    def __init__(self, dpi: int = 300, image_dir: Optional[str] = None,
                 use_text_layer: bool = False):
        self.dpi = dpi
        self.image_dir = image_dir
        self.use_text_layer = use_text_layer

    def extract_text(self, pdf_path: str) -> str:
        """
        Extract the text of page 1.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            Text for the parser; empty string when OCR finds nothing

        Raises:
            DocumentExtractionError: If the PDF cannot be read or rendered
        """
        if self.use_text_layer:
            text = self.extract_text_layer(pdf_path)
            if text.strip():
                logger.info(f"Using embedded text layer ({len(text)} characters)")
                return text
            logger.info("No embedded text layer, falling back to OCR")

        image = self.render_first_page(pdf_path)
        text = self.ocr_image(image)
        logger.info(f"OCR extracted {len(text)} characters from {Path(pdf_path).name}")
        return text

    def render_first_page(self, pdf_path: str) -> Image.Image:
        """Rasterize page 1 with pdftoppm and flatten any transparency onto white."""
        with tempfile.TemporaryDirectory() as temp_dir:
            prefix = os.path.join(temp_dir, "page")
            try:
                subprocess.run([
                    'pdftoppm',
                    '-png',
                    '-r', str(self.dpi),
                    '-f', '1',
                    '-l', '1',
                    '-singlefile',
                    pdf_path,
                    prefix
                ], capture_output=True, text=True, check=True)
            except FileNotFoundError as e:
                raise DocumentExtractionError("pdftoppm is not installed") from e
            except subprocess.CalledProcessError as e:
                raise DocumentExtractionError(
                    f"pdftoppm failed for {pdf_path}: {e.stderr.strip()}"
                ) from e

            with Image.open(f"{prefix}.png") as rendered:
                image = flatten_transparency(rendered)

        if self.image_dir:
            os.makedirs(self.image_dir, exist_ok=True)
            image_path = os.path.join(self.image_dir, f"{Path(pdf_path).stem}.png")
            image.save(image_path)
            logger.debug(f"Saved page image to {image_path}")

        return image

    def ocr_image(self, image: Image.Image) -> str:
        """Full-page OCR; empty string when nothing is recognized."""
        try:
            text = pytesseract.image_to_string(image, config='--psm 6')
        except pytesseract.TesseractNotFoundError as e:
            raise DocumentExtractionError("tesseract is not installed") from e
        return text or ""

    def extract_text_layer(self, pdf_path: str) -> str:
        """Text of page 1 for PDFs that already carry a text layer."""
        try:
            with pdfplumber.open(pdf_path) as pdf:
                if not pdf.pages:
                    return ""
                return pdf.pages[0].extract_text() or ""
        except Exception as e:
            raise DocumentExtractionError(f"Could not read {pdf_path}: {e}") from e


def flatten_transparency(image: Image.Image) -> Image.Image:
    """Return an RGB copy of the image composited onto a white background."""
    if image.mode in ('RGBA', 'LA') or (image.mode == 'P' and 'transparency' in image.info):
        rgba = image.convert('RGBA')
        background = Image.new('RGB', rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.split()[-1])
        return background
    return image.convert('RGB')


def extract_document_text(pdf_path: str, dpi: int = 300, image_dir: Optional[str] = None,
                          use_text_layer: bool = False) -> str:
    """
    Convenience function to get the parser input for one PDF.

    Args:
        pdf_path: Path to the PDF file
        dpi: Render resolution for OCR
        image_dir: Optional directory that keeps the rendered page images
        use_text_layer: Prefer pdfplumber's text layer when present

    Returns:
        Page 1 text
    """
    extractor = DocumentTextExtractor(dpi=dpi, image_dir=image_dir, use_text_layer=use_text_layer)
    return extractor.extract_text(pdf_path)
