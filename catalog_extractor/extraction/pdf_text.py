from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import pymupdf

from ..utils import PDFProcessingError
from ..utils.logger import setup_logger

logger = setup_logger("pdf_text")


@dataclass
class ExtractedDocument:
    """Plain text of a catalog PDF, page by page"""
    filename: str
    pages: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.pages)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    def sample(self, page_count: int) -> str:
        return "\n".join(self.pages[:page_count])


def extract_pdf_text(pdf_path: Path) -> ExtractedDocument:
    """
    Extract the text of every page with PyMuPDF.

    Args:
        pdf_path: Path to the catalog PDF

    Returns:
        ExtractedDocument with one entry per page
    """
    pdf_path = Path(pdf_path)
    try:
        doc = pymupdf.open(pdf_path)
    except Exception as e:
        raise PDFProcessingError(f"Could not open {pdf_path.name}: {str(e)}") from e

    try:
        pages = []
        for page_num in range(len(doc)):
            pages.append(doc[page_num].get_text("text", sort=True))
        logger.info(f"Extracted {len(pages)} pages from {pdf_path.name}")
    except Exception as e:
        raise PDFProcessingError(f"Could not read {pdf_path.name}: {str(e)}") from e
    finally:
        doc.close()

    return ExtractedDocument(filename=pdf_path.name, pages=pages)


def split_pages(text: str) -> List[str]:
    """Split text on form feeds, the page separator pdftotext emits."""
    pages = text.split("\f")
    if pages and not pages[-1].strip():
        pages = pages[:-1]
    return pages
