"""
Extractors for the non-degree sections of enhanced catalogs: standalone
courses (with bundle pricing), certificate programs and program outcomes.
"""

import re
from typing import Dict, List, Optional, Sequence, Tuple

from ..constants import OUTCOME_KEYWORDS, OUTCOME_SCHOOLS, STANDALONE_ACCESS_TYPE
from ..models import (
    CertificateProgram,
    CourseBundleInfo,
    OutcomeCategory,
    OutcomeItem,
    PriceRange,
    ProgramOutcome,
    StandaloneCourse,
)
from ..utils.logger import setup_logger
from .sections import COURSE_CODE, find_section

BUNDLE_PRICING = re.compile(r"Bundle\s+pricing.*?(\$[\d,]+)\s*[-–]\s*(\$[\d,]+)", re.IGNORECASE)
ACCESS_DURATION = re.compile(r"(\d+)\s*months?\s+access", re.IGNORECASE)
STANDALONE_COURSE = re.compile(
    rf"({COURSE_CODE})\s*[-–]\s*([^$\n]+?)\s*\$?([\d,]+)(?:\s*\((\d+)\s*CUs?\))?"
)
CERTIFICATE = re.compile(r"([^$\n]+?)\s*[-–]\s*([^$\n]+?)\s*\$([\d,]+)(?:\s*\((\d+)\s*CUs?\))?")
CODE_IN_TEXT = re.compile(rf"({COURSE_CODE})")
PROGRAM_BLOCK = re.compile(
    r"(Bachelor|Master|Doctor)\s+of\s+[^:\n]+:\s*\n(.*?)"
    r"(?=\n(?:Bachelor|Master|Doctor)\s+of|\n\s*School|\Z)",
    re.IGNORECASE | re.DOTALL,
)
BULLET = re.compile(r"[•·▪]\s*([^\n•·▪]+)")


def _to_int(amount: str) -> int:
    return int(amount.replace("$", "").replace(",", ""))


class StandaloneExtractor:
    def __init__(self,
                 outcome_schools: Sequence[str] = OUTCOME_SCHOOLS,
                 outcome_keywords: Sequence[Tuple[OutcomeCategory, Sequence[str]]] = OUTCOME_KEYWORDS):
        self.outcome_schools = tuple(outcome_schools)
        self.outcome_keywords = tuple(outcome_keywords)
        self.logger = setup_logger("standalone_extractor")

    def extract_standalone_courses(self, text: str) -> Tuple[Dict[str, StandaloneCourse], List[CourseBundleInfo]]:
        """
        Parse the Standalone Courses section.

        Returns:
            Standalone courses keyed by course code, and the bundle offer if the
            section advertises bundle pricing.
        """
        courses: Dict[str, StandaloneCourse] = {}
        bundles: List[CourseBundleInfo] = []

        section = find_section(text, r"Standalone\s+Courses?", (r"Certificate", r"Course\s+Descriptions", r"©"))
        if section is None:
            self.logger.warning("No standalone courses section found")
            return courses, bundles

        for match in STANDALONE_COURSE.finditer(section):
            code = match.group(1).strip()
            courses[code] = StandaloneCourse(
                code=code,
                name=match.group(2).strip(),
                price=_to_int(match.group(3)),
                competency_units=int(match.group(4)) if match.group(4) else None,
                access_type=STANDALONE_ACCESS_TYPE,
            )

        bundle_match = BUNDLE_PRICING.search(section)
        if bundle_match:
            duration_match = ACCESS_DURATION.search(section)
            bundles.append(CourseBundleInfo(
                courses=list(courses),
                price_range=PriceRange(min=_to_int(bundle_match.group(1)), max=_to_int(bundle_match.group(2))),
                duration=f"{duration_match.group(1)} months" if duration_match else None,
                access_type=STANDALONE_ACCESS_TYPE,
            ))

        self.logger.info(f"Found {len(courses)} standalone courses")
        return courses, bundles

    def extract_certificates(self, text: str) -> Dict[str, CertificateProgram]:
        """
        Parse the Certificate Programs section. Catalogs carry no certificate
        codes, so they are numbered CERT1, CERT2, ... in document order.
        """
        certificates: Dict[str, CertificateProgram] = {}

        section = find_section(text, r"Certificate\s+Programs?", (r"Course\s+Descriptions", r"Standalone", r"©"))
        if section is None:
            self.logger.warning("No certificate programs section found")
            return certificates

        for index, match in enumerate(CERTIFICATE.finditer(section), 1):
            code = f"CERT{index}"
            description = match.group(2).strip()
            courses = CODE_IN_TEXT.findall(description)
            certificates[code] = CertificateProgram(
                code=code,
                name=match.group(1).strip(),
                description=description,
                price=_to_int(match.group(3)),
                total_cus=int(match.group(4)) if match.group(4) else None,
                courses=courses or None,
            )

        self.logger.info(f"Found {len(certificates)} certificate programs")
        return certificates

    def extract_program_outcomes(self, text: str) -> Dict[str, ProgramOutcome]:
        outcomes: Dict[str, ProgramOutcome] = {}

        section = find_section(text, r"Program\s+Outcomes?", (r"Course\s+Descriptions", r"Certificate", r"©"))
        if section is None:
            self.logger.warning("No program outcomes section found")
            return outcomes

        for school in self.outcome_schools:
            school_match = re.search(
                rf"School\s+of\s+{school}\s*\n(.*?)(?=\nSchool\s+of|\Z)",
                section,
                re.IGNORECASE | re.DOTALL,
            )
            if not school_match:
                continue

            for program_match in PROGRAM_BLOCK.finditer(school_match.group(1)):
                program = program_match.group(0).split(":")[0].strip()
                items = [
                    OutcomeItem(outcome=bullet.strip(), category=self.categorize(bullet))
                    for bullet in BULLET.findall(program_match.group(2))
                ]
                outcome = ProgramOutcome(school=school, program=program, outcomes=items)
                outcomes[outcome.key] = outcome

        self.logger.info(f"Found {len(outcomes)} program outcomes")
        return outcomes

    def categorize(self, outcome: str) -> Optional[OutcomeCategory]:
        text = outcome.lower()
        for category, keywords in self.outcome_keywords:
            if any(keyword in text for keyword in keywords):
                return category
        return None
