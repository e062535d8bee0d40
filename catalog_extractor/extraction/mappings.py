"""
Lookup tables built from structured parts of a catalog.

The CCN, competency unit and detailed description maps are built once per
parse and handed to the course extractor as read-only inputs.
"""

import re
from typing import Dict, Tuple

from ..utils.logger import setup_logger
from .sections import CCN_TOKEN, COURSE_CODE, find_section, normalize_whitespace

CCN_TABLE = re.compile(
    r"CCN\s+Course(?:\s+Number)?\s+Course\s+Description.*?(?=\n\s*\n|\Z)",
    re.IGNORECASE | re.DOTALL,
)
CCN_ROW = re.compile(
    rf"({CCN_TOKEN})\s+({COURSE_CODE})\s+(.+?)(?=\n{CCN_TOKEN}|\n\s*\n|\Z)",
    re.DOTALL,
)
CU_ROW = re.compile(rf"({COURSE_CODE})\s+(\d{{1,2}})\s+[A-Z][a-zA-Z \t&,.\-:()'/]*")
DESCRIPTION_ENTRY = re.compile(
    rf"({COURSE_CODE})\s*[-–—]\s*([^-–—\n]+?)\s*[-–—]\s*(.+?)"
    rf"(?=\n{COURSE_CODE}\s*[-–—]|\n\s*\n|\Z)",
    re.DOTALL,
)
PAGE_NUMBER = re.compile(r"\n\s*\d+\s*\n")
COPYRIGHT = re.compile(r"©.*?University.*?\d+", re.DOTALL)


class MappingExtractor:
    """
    Builds code -> value lookups from CCN tables, CU tables and the
    Course Descriptions section.
    """

    def __init__(self,
                 cu_range: Tuple[int, int] = (1, 12),
                 min_description_length: int = 20):
        self.cu_range = cu_range
        self.min_description_length = min_description_length
        self.logger = setup_logger("mapping_extractor")

    def extract_ccn_map(self, text: str) -> Dict[str, str]:
        """
        Map course codes to CCNs from every "CCN Course Number Course Description" table.

        Rows scanned later overwrite earlier rows for the same course code.
        """
        ccn_map: Dict[str, str] = {}

        for table in CCN_TABLE.finditer(text):
            for row in CCN_ROW.finditer(table.group(0)):
                ccn = normalize_whitespace(row.group(1))
                ccn_map[row.group(2)] = ccn

        self.logger.info(f"Extracted {len(ccn_map)} CCN mappings from degree plan tables")
        return ccn_map

    def extract_cu_map(self, text: str) -> Dict[str, int]:
        """
        Map course codes to competency units from rows like "C182  3  Introduction to IT".

        Values outside the accepted range are page numbers or other noise and are dropped.
        """
        cu_map: Dict[str, int] = {}
        low, high = self.cu_range

        for match in CU_ROW.finditer(text):
            units = int(match.group(2))
            if low <= units <= high:
                cu_map[match.group(1)] = units

        self.logger.info(f"Extracted {len(cu_map)} CU mappings")
        return cu_map

    def extract_description_map(self, text: str) -> Dict[str, str]:
        """
        Map course codes to the long descriptions in the Course Descriptions section.

        Args:
            text: Full catalog text

        Returns:
            Dict of course code to cleaned description. Empty when the section is missing.
        """
        descriptions: Dict[str, str] = {}

        section = find_section(text, r"Course\s+Descriptions", (r"Instructor", r"Faculty", r"©"))
        if section is None:
            self.logger.warning("Could not find Course Descriptions section")
            return descriptions

        for match in DESCRIPTION_ENTRY.finditer(section):
            description = self.clean_description(match.group(3))
            if len(description) >= self.min_description_length:
                descriptions[match.group(1)] = description

        self.logger.info(f"Extracted {len(descriptions)} detailed course descriptions")
        return descriptions

    @staticmethod
    def clean_description(raw: str) -> str:
        """Strip page numbers and copyright lines, then collapse whitespace."""
        cleaned = PAGE_NUMBER.sub("\n", raw)
        cleaned = COPYRIGHT.sub("", cleaned)
        return normalize_whitespace(cleaned)
