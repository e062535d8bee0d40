"""
Catalog text extraction: format detection, lookup maps and entity extractors.
"""

from .catalog_parser import CatalogParser
from .course_merger import CatalogCourseMerger
from .course_parser import CourseExtractor
from .course_type import KeywordCourseTypeClassifier
from .degree_plan_parser import DegreePlanExtractor
from .detector import CatalogFormatDetector
from .mappings import MappingExtractor
from .standalone_parser import StandaloneExtractor

__all__ = [
    'CatalogParser',
    'CatalogCourseMerger',
    'CourseExtractor',
    'KeywordCourseTypeClassifier',
    'DegreePlanExtractor',
    'CatalogFormatDetector',
    'MappingExtractor',
    'StandaloneExtractor',
]
