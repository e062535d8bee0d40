"""
Catalog format detection.

Chooses an extraction strategy from the year in the catalog filename and,
when a text sample is available, from content signatures of each era.
"""

import re
from datetime import datetime
from typing import Optional, Sequence

from ..constants import CATALOG_FORMATS
from ..models import CatalogFormat, FormatVersion
from ..utils.logger import setup_logger

LEGACY_SIGNATURES = (
    re.compile(r"[A-Z]\d{3,4}[A-Z]?\s*\([A-Z]{2,4}\s+\d{3,5}\)"),
    re.compile(r"[A-Z]\d{3,4}[A-Z]?\s*[-–][^\n]*\[[A-Z]{2,4}\s+\d{3,5}[A-Z]?\]"),
)
MODERN_SIGNATURE = re.compile(r"CCN\s+Course\s+Number\s+Course\s+Description")
ENHANCED_SIGNATURES = (
    re.compile(r"Program\s+Outcomes"),
    re.compile(r"Standalone\s+Courses"),
)


def extract_year(filename: str) -> int:
    """First 4-digit run in the filename, or the current year."""
    match = re.search(r"(\d{4})", filename)
    return int(match.group(1)) if match else datetime.now().year


class CatalogFormatDetector:
    def __init__(self,
                 filename: str,
                 text_sample: Optional[str] = None,
                 formats: Sequence[CatalogFormat] = CATALOG_FORMATS):
        if not formats:
            raise ValueError("At least one catalog format must be registered")
        self.filename = filename
        self.year = extract_year(filename)
        self.text_sample = text_sample or ""
        self.formats = tuple(formats)
        self.logger = setup_logger("format_detector")

    def detect(self) -> CatalogFormat:
        """
        Detect the catalog format. Always returns a descriptor.
        """
        for catalog_format in self.formats:
            if catalog_format.covers_year(self.year):
                if not self.text_sample:
                    # No sample loaded, trust the year
                    return catalog_format
                if self.matches_signature(catalog_format):
                    return catalog_format
                self.logger.info(
                    f"{self.filename}: year {self.year} suggests {catalog_format.version.value} "
                    f"but content does not match, scanning all signatures"
                )
                break

        if self.text_sample:
            for catalog_format in self.formats:
                if self.matches_signature(catalog_format):
                    return catalog_format

        fallback = self.formats[-1]
        self.logger.warning(
            f"No format matched {self.filename}, falling back to {fallback.version.value}"
        )
        return fallback

    def matches_signature(self, catalog_format: CatalogFormat) -> bool:
        """Check the text sample against the content signature of a format."""
        sample = self.text_sample
        version = catalog_format.version
        if version is FormatVersion.LEGACY:
            # Legacy catalogs carry the CCN inline: "C182 (ITEC 1010)" or "[ITEC 1010]"
            return any(pattern.search(sample) for pattern in LEGACY_SIGNATURES)
        elif version is FormatVersion.MODERN:
            return bool(MODERN_SIGNATURE.search(sample))
        elif version is FormatVersion.ENHANCED:
            return any(pattern.search(sample) for pattern in ENHANCED_SIGNATURES)
        return False

    def format_info(self, catalog_format: Optional[CatalogFormat] = None) -> str:
        """Detailed format info for logging"""
        catalog_format = catalog_format or self.detect()
        low, high = catalog_format.year_range
        return (
            f"Catalog Format Detection:\n"
            f"  File: {self.filename}\n"
            f"  Year: {self.year}\n"
            f"  Detected Version: {catalog_format.version.value}\n"
            f"  Strategy: {catalog_format.strategy}\n"
            f"  Year Range: {low}-{high}\n"
            f"  Table Format: {catalog_format.table_format}\n"
            f"  Patterns: {', '.join(catalog_format.content_patterns)}"
        )
