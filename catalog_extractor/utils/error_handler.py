import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for errors raised outside the extraction core."""
    pass


class PDFProcessingError(CatalogError):
    """Raised when a catalog PDF cannot be opened or read."""
    pass


class ValidationError(CatalogError):
    """Raised when caller input is invalid."""
    pass


class DataExtractionError(CatalogError):
    """Raised when there is no data to work on."""
    pass


def handle_extraction_error(error: Exception) -> Dict[str, Any]:
    """
    Handle errors raised while loading, parsing or merging catalogs.

    Args:
        error (Exception): The caught exception

    Returns:
        Dict[str, Any]: Error response details
    """
    logger.error(f"Error occurred: {str(error)}", exc_info=True)

    error_response = {
        "status": "error",
        "message": str(error),
        "type": error.__class__.__name__
    }

    if isinstance(error, PDFProcessingError):
        error_response["code"] = "PDF_PROCESSING_ERROR"
    elif isinstance(error, ValidationError):
        error_response["code"] = "VALIDATION_ERROR"
    elif isinstance(error, DataExtractionError):
        error_response["code"] = "DATA_EXTRACTION_ERROR"
    else:
        error_response["code"] = "UNKNOWN_ERROR"

    return error_response
