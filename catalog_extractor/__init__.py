"""
Catalog Extractor
-----------------
Turns the extracted text of academic catalog PDFs (2017 onwards) into
structured courses, degree plans, standalone courses, certificates and
program outcomes.
"""

__version__ = '0.1.0'

from .extraction import CatalogParser, CatalogCourseMerger
from .models import ParsedCatalog

__all__ = ['CatalogParser', 'CatalogCourseMerger', 'ParsedCatalog', '__version__']
