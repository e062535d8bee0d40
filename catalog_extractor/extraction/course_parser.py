"""
Course extraction.

Legacy catalogs (2017-2020) carry everything on one line:
    C182 - Introduction to IT (3 credits) [ITEC 1010]

Modern and enhanced catalogs spread course data across the document, so the
inline "CODE - Name - Description" lines are enriched from the CCN, CU and
description maps. Some catalogs also come out of text extraction with the
code, name, CUs and term run together ("D627Public Health Education34"),
which a second pass picks up.
"""

import re
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..constants import TRUNCATION_FIXES
from ..models import CatalogFormat, Course, FormatVersion
from ..utils.logger import setup_logger
from .course_type import CourseTypeClassifier, KeywordCourseTypeClassifier
from .sections import CCN_TOKEN, COURSE_CODE

LEGACY_COURSE = re.compile(
    rf"({COURSE_CODE})\s*[-–]\s*([^(\n]+?)\s*\((\d+)\s*(?:credit|competency unit)s?\)"
    rf"\s*(?:\[({CCN_TOKEN})\])?"
)
STANDARD_COURSE = re.compile(rf"\b({COURSE_CODE})\s*-\s*([^-\n\r]+?)\s*-\s*([^\n\r]+)")
# Name must follow the code directly and stay on one line
CONCATENATED_COURSE = re.compile(
    rf"\b({COURSE_CODE})([A-Za-z][A-Za-z \t&,.\-:()'/]*?)(\d{{1,2}})(\d)"
    rf"(?=\s|$|[A-Z]{{2,6}}\s+\d{{3,4}})"
)
INLINE_CU = re.compile(r"(\d+)\s*(?:credit|competency|cu)", re.IGNORECASE)
PREREQUISITES = re.compile(r"Prerequisites?:\s*([^.\n]*)", re.IGNORECASE)
COREQUISITES = re.compile(r"Corequisites?:\s*([^.\n]*)", re.IGNORECASE)
CODE_IN_TEXT = re.compile(rf"\b({COURSE_CODE})\b")


class CourseExtractor:
    """Strategy-specific course extraction."""

    def __init__(self,
                 classifier: Optional[CourseTypeClassifier] = None,
                 truncation_fixes: Sequence[Tuple[str, str]] = TRUNCATION_FIXES,
                 cu_range: Tuple[int, int] = (1, 12),
                 inline_description_min_length: int = 50):
        self.classifier = classifier or KeywordCourseTypeClassifier()
        self.truncation_fixes = tuple(truncation_fixes)
        self.cu_range = cu_range
        self.inline_description_min_length = inline_description_min_length
        self.logger = setup_logger("course_extractor")

    def extract(self,
                text: str,
                catalog_format: CatalogFormat,
                ccn_map: Mapping[str, str],
                cu_map: Mapping[str, int],
                description_map: Mapping[str, str]) -> List[Course]:
        """
        Extract courses with the strategy of the detected format.

        Returns:
            Courses in extraction order. The same code may appear more than once.
        """
        version = catalog_format.version
        if version is FormatVersion.LEGACY:
            records = self.extract_legacy(text)
        elif version in (FormatVersion.MODERN, FormatVersion.ENHANCED):
            records = self.extract_modern(text, ccn_map, cu_map, description_map)
        else:
            self.logger.warning(f"No course strategy for format {version}")
            records = []

        return self._assemble(records)

    def extract_legacy(self, text: str) -> List[Dict]:
        """Self-contained legacy lines, no cross-referencing."""
        records = []

        matches = list(LEGACY_COURSE.finditer(text))
        self.logger.info(f"Found {len(matches)} legacy format courses")

        for match in matches:
            code = match.group(1).strip()
            name = match.group(2).strip()
            ccn = match.group(4).strip() if match.group(4) else None
            records.append({
                'code': code,
                'name': name,
                'competency_units': int(match.group(3)),
                'ccn': ccn,
                'course_type': self.classifier(code, name, ccn, None),
            })

        return records

    def extract_modern(self,
                       text: str,
                       ccn_map: Mapping[str, str],
                       cu_map: Mapping[str, int],
                       description_map: Mapping[str, str]) -> List[Dict]:
        """
        Standard "CODE - Name - Description" matches followed by concatenated
        "CODENameCUTerm" matches. Both are kept in that order.
        """
        records = []

        standard_matches = list(STANDARD_COURSE.finditer(text))
        self.logger.info(f"Found {len(standard_matches)} standard modern course patterns")

        for match in standard_matches:
            code = match.group(1).strip()
            name = match.group(2).strip()
            inline_description = match.group(3).strip()

            ccn = ccn_map.get(code)
            units = cu_map.get(code)
            if units is None:
                units = self._inline_units(inline_description)

            description = description_map.get(code)
            if description is None and len(inline_description) > self.inline_description_min_length:
                description = inline_description

            records.append({
                'code': code,
                'name': name,
                'description': description,
                'ccn': ccn,
                'competency_units': units,
                'course_type': self.classifier(code, name, ccn, description),
            })

        concatenated_matches = list(CONCATENATED_COURSE.finditer(text))
        self.logger.info(f"Found {len(concatenated_matches)} concatenated modern course patterns")

        for match in concatenated_matches:
            units = int(match.group(3))
            if not self._in_cu_range(units):
                continue

            code, name = self.fix_truncated_name(match.group(1).strip(), match.group(2).strip())
            ccn = ccn_map.get(code)
            description = description_map.get(code)

            records.append({
                'code': code,
                'name': name,
                'description': description,
                'ccn': ccn,
                'competency_units': units,
                'course_type': self.classifier(code, name, ccn, description),
            })

        return records

    def fix_truncated_name(self, code: str, name: str) -> Tuple[str, str]:
        """
        Restore a course name whose first letter was swallowed by the course code.

        "D627P" + "ublic Health" becomes "D627" + "Public Health".
        """
        for truncated, fixed in self.truncation_fixes:
            if name.startswith(truncated):
                restored = fixed[0]
                if code.endswith(restored) and len(code) > 1:
                    code = code[:-1]
                return code, fixed + name[len(truncated):]
        return code, name

    def _inline_units(self, description: str) -> Optional[int]:
        match = INLINE_CU.search(description)
        if not match:
            return None
        units = int(match.group(1))
        return units if self._in_cu_range(units) else None

    def _in_cu_range(self, units: int) -> bool:
        low, high = self.cu_range
        return low <= units <= high

    def _assemble(self, records: List[Dict]) -> List[Course]:
        """Add requisites and alternate versions, then build the Course models."""
        codes = {record['code'] for record in records}
        alternates: Dict[str, List[str]] = {}
        for code in sorted(codes):
            if code[-1].isalpha() and code[:-1] in codes:
                alternates.setdefault(code[:-1], []).append(code)

        courses = []
        for record in records:
            description = record.get('description')
            courses.append(Course(
                **record,
                prerequisites=_requisites(PREREQUISITES, description),
                corequisites=_requisites(COREQUISITES, description),
                alternate_versions=alternates.get(record['code']),
            ))
        return courses


def _requisites(pattern: re.Pattern, description: Optional[str]) -> Optional[List[str]]:
    if not description:
        return None
    match = pattern.search(description)
    if not match:
        return None
    codes = CODE_IN_TEXT.findall(match.group(1))
    return codes or None
