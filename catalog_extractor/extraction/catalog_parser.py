"""
Catalog parser: runs every extraction stage over one catalog's text and
assembles the parsed catalog with its coverage statistics.
"""

import re
import time
from collections import Counter
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from ..config import Settings
from ..constants import CATALOG_FORMATS
from ..models import (
    CatalogFormat,
    CatalogMetadata,
    CatalogStatistics,
    Course,
    DataQuality,
    DegreePlan,
    DegreePlanStatistics,
    ParsedCatalog,
    ValidationIssue,
)
from ..utils import ValidationError
from ..utils.logger import configure_logging, setup_logger
from .course_parser import CourseExtractor
from .course_type import CourseTypeClassifier
from .degree_plan_parser import DegreePlanExtractor
from .detector import CatalogFormatDetector
from .mappings import MappingExtractor
from .pdf_text import extract_pdf_text, split_pages
from .sections import is_valid_course_code
from .standalone_parser import StandaloneExtractor

FILENAME_DATE = re.compile(r"(\d{4})-(\d{2})")
CONTENT_YEAR = re.compile(r"(?:Catalog|Copyright).*?(\d{4})", re.IGNORECASE)


def _percent(part: int, whole: int) -> int:
    return round(part / whole * 100) if whole else 0


class CatalogParser:
    """
    Sequences format detection, the mapping extractors, course, degree plan
    and ancillary extraction for a single catalog.

    Instances hold no per-document state; one parser can process many catalogs.
    """

    def __init__(self,
                 settings: Optional[Settings] = None,
                 classifier: Optional[CourseTypeClassifier] = None,
                 formats: Sequence[CatalogFormat] = CATALOG_FORMATS):
        if settings is not None:
            configure_logging(settings)
        self.settings = settings or Settings()
        self.formats = tuple(formats)
        self.mapping_extractor = MappingExtractor(
            cu_range=self.settings.cu_range,
            min_description_length=self.settings.MIN_DESCRIPTION_LENGTH,
        )
        self.course_extractor = CourseExtractor(
            classifier=classifier,
            cu_range=self.settings.cu_range,
            inline_description_min_length=self.settings.INLINE_DESCRIPTION_MIN_LENGTH,
        )
        self.degree_plan_extractor = DegreePlanExtractor()
        self.standalone_extractor = StandaloneExtractor()
        self.logger = setup_logger("catalog_parser")

    def parse_file(self, file_path: Path) -> ParsedCatalog:
        """
        Parse a catalog PDF, or a text file already extracted from one.
        """
        file_path = Path(file_path)
        suffix = file_path.suffix.lower()

        if suffix == ".pdf":
            document = extract_pdf_text(file_path)
            return self.parse_text(
                document.text,
                file_path.name,
                total_pages=document.total_pages,
                sample=document.sample(self.settings.SAMPLE_PAGES),
            )
        if suffix == ".txt":
            text = file_path.read_text(encoding="utf-8")
            return self.parse_text(text, file_path.name)

        raise ValidationError(f"Unsupported catalog file type: {file_path.name}")

    def parse_text(self,
                   text: str,
                   filename: str,
                   total_pages: Optional[int] = None,
                   sample: Optional[str] = None) -> ParsedCatalog:
        """
        Parse one catalog.

        Args:
            text: Full extracted text of the catalog
            filename: Source filename, used for the catalog year and date
            total_pages: Page count; counted from form feeds when omitted
            sample: Detection sample; defaults to the first SAMPLE_PAGES pages of text

        Returns:
            ParsedCatalog. Sparse input gives low coverage, never an exception.
        """
        started = time.perf_counter()
        timings: Dict[str, int] = {}
        self.logger.info(f"Starting catalog parse for {filename}")

        pages = split_pages(text)
        if sample is None:
            sample = "\n".join(pages[:self.settings.SAMPLE_PAGES])
        if total_pages is None:
            total_pages = len(pages)

        with self._timed("detection", timings):
            detector = CatalogFormatDetector(filename, sample, self.formats)
            catalog_format = detector.detect()
            self.logger.info(detector.format_info(catalog_format))

        with self._timed("mappings", timings):
            ccn_map = self.mapping_extractor.extract_ccn_map(text)
            cu_map = self.mapping_extractor.extract_cu_map(text)
            description_map = self.mapping_extractor.extract_description_map(text)

        with self._timed("courses", timings):
            extracted = self.course_extractor.extract(text, catalog_format, ccn_map, cu_map, description_map)
            courses, duplicate_count = self.collect_courses(extracted)

        with self._timed("degree_plans", timings):
            degree_plans = self.degree_plan_extractor.extract(text)

        with self._timed("ancillary", timings):
            standalone_courses, bundles = self.standalone_extractor.extract_standalone_courses(text)
            certificates = self.standalone_extractor.extract_certificates(text)
            outcomes = self.standalone_extractor.extract_program_outcomes(text)

        issues = self.validate_degree_plans(courses, degree_plans)
        if issues:
            self.logger.warning(f"Validation found {len(issues)} issues")

        statistics = self.calculate_statistics(
            courses,
            degree_plans,
            duplicate_count=duplicate_count,
            standalone_count=len(standalone_courses),
            certificate_count=len(certificates),
            outcome_count=len(outcomes),
        )

        metadata = CatalogMetadata(
            catalog_date=self.extract_catalog_date(filename, text),
            parser_version=catalog_format.parser_version,
            parsed_at=datetime.now(timezone.utc).isoformat(),
            total_pages=total_pages,
            parsing_time_ms=int((time.perf_counter() - started) * 1000),
            detected_format=catalog_format.version.value,
            stage_timings_ms=timings,
            statistics=statistics,
            validation_issues=issues,
        )

        self.logger.info(
            f"Parsed {filename}: {statistics.courses_found} courses, "
            f"{statistics.degree_plans_found} degree plans, "
            f"CCN coverage {statistics.ccn_coverage}%, CU coverage {statistics.cu_coverage}%"
        )

        return ParsedCatalog(
            courses=courses,
            degree_plans=degree_plans,
            standalone_courses=standalone_courses,
            certificate_programs=certificates,
            program_outcomes=outcomes,
            course_bundles=bundles,
            metadata=metadata,
        )

    @staticmethod
    def collect_courses(extracted: Iterable[Course]):
        """
        Key courses by code. A later extraction of the same code replaces the
        earlier one; the number of replacements is returned alongside.
        """
        courses: Dict[str, Course] = {}
        duplicates = 0
        for course in extracted:
            if course.code in courses:
                duplicates += 1
            courses[course.code] = course
        return courses, duplicates

    def validate_degree_plans(self,
                              courses: Dict[str, Course],
                              degree_plans: List[DegreePlan]) -> List[ValidationIssue]:
        """
        Report degree plan course references missing from the course map and
        plans without a total CU count. Plans are left untouched.
        """
        issues = []
        reported = set()

        for plan in degree_plans:
            for code in plan.courses:
                if code not in courses and code not in reported:
                    reported.add(code)
                    issues.append(ValidationIssue(
                        type="missing_course",
                        severity="error",
                        location=f"DegreePlan: {plan.name}",
                        message=f"Course {code} referenced in degree plan but not found in course catalog",
                        details={'courseCode': code, 'planName': plan.name},
                    ))

            if plan.total_cus is None:
                issues.append(ValidationIssue(
                    type="missing_data",
                    severity="warning",
                    location=f"DegreePlan: {plan.name}",
                    message="Degree plan missing total CUs",
                    details={'planName': plan.name},
                ))

        if reported:
            sample = ", ".join(sorted(reported)[:10])
            self.logger.warning(f"{len(reported)} degree plan courses missing from catalog: {sample}")
        return issues

    @staticmethod
    def calculate_statistics(courses: Dict[str, Course],
                             degree_plans: List[DegreePlan],
                             duplicate_count: int = 0,
                             standalone_count: int = 0,
                             certificate_count: int = 0,
                             outcome_count: int = 0) -> CatalogStatistics:
        values = list(courses.values())
        total = len(values)
        with_ccn = sum(1 for c in values if c.ccn)
        with_cus = sum(1 for c in values if c.competency_units)
        with_description = sum(1 for c in values if c.description)

        plan_courses = [code for plan in degree_plans for code in plan.courses]
        schools = Counter(plan.school for plan in degree_plans if plan.school)

        return CatalogStatistics(
            courses_found=total,
            degree_plans_found=len(degree_plans),
            standalone_courses=standalone_count,
            certificate_programs=certificate_count,
            program_outcomes=outcome_count,
            ccn_coverage=_percent(with_ccn, total),
            cu_coverage=_percent(with_cus, total),
            description_coverage=_percent(with_description, total),
            duplicate_code_count=duplicate_count,
            invalid_code_count=sum(1 for code in courses if not is_valid_course_code(code)),
            courses_by_prefix=dict(Counter(code[0] for code in courses)),
            degree_plan_statistics=DegreePlanStatistics(
                total_courses=len(plan_courses),
                unique_courses=len(set(plan_courses)),
                average_courses_per_plan=round(len(plan_courses) / (len(degree_plans) or 1)),
                plans_with_total_cus=sum(1 for plan in degree_plans if plan.total_cus),
                school_distribution=dict(schools) or None,
            ),
            data_quality=DataQuality(
                courses_with_description=with_description,
                courses_with_ccn=with_ccn,
                courses_with_cus=with_cus,
                complete_course_records=sum(
                    1 for c in values if c.ccn and c.competency_units and c.description
                ),
            ),
        )

    @staticmethod
    def extract_catalog_date(filename: str, text: str) -> str:
        """YYYY-MM from the filename, else a year from the content, else the current year."""
        match = FILENAME_DATE.search(filename)
        if match:
            return f"{match.group(1)}-{match.group(2)}"

        match = CONTENT_YEAR.search(text)
        if match:
            return match.group(1)

        return str(datetime.now().year)

    @contextmanager
    def _timed(self, stage: str, timings: Dict[str, int]):
        started = time.perf_counter()
        try:
            yield
        finally:
            timings[stage] = int((time.perf_counter() - started) * 1000)
            self.logger.debug(f"Stage {stage} took {timings[stage]} ms")
