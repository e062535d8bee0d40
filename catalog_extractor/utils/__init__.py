"""
Utility functions and error handling for the Catalog Extractor.
"""

from .error_handler import (
    handle_extraction_error,
    CatalogError,
    PDFProcessingError,
    ValidationError,
    DataExtractionError
)
from .logger import configure_logging, setup_logger

__all__ = [
    'handle_extraction_error',
    'setup_logger',
    'configure_logging',
    'CatalogError',
    'PDFProcessingError',
    'ValidationError',
    'DataExtractionError'
]
