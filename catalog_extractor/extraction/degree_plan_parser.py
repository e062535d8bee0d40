import re
from typing import Dict, List, Optional, Sequence, Tuple

from ..constants import SCHOOL_KEYWORDS
from ..models import DegreePlan
from ..utils.logger import setup_logger
from .sections import CCN_TOKEN, COURSE_CODE

DEGREE_BLOCK = re.compile(
    r"(Bachelor|Master|Associate|Doctor)\s+of\s+[^.\n]+?(?<![:\s])[ \t]*\n(.*?)"
    r"(?=\n(?:Bachelor|Master|Associate|Doctor)\s+of\s+"
    r"|\n\s*(?:Certificate|Standalone|Course\s+Descriptions)|\Z)",
    re.IGNORECASE | re.DOTALL,
)
TABLE_BLOCK = re.compile(
    r"Program:\s*([^\n]+)\s*\n.*?CCN\s+Course\s+Number\s+Course\s+Description.*?"
    r"(?=\nProgram:|\n\s*Certificate|\Z)",
    re.IGNORECASE | re.DOTALL,
)
PROGRAM_CODE = re.compile(r"\(([A-Z]+)\)")
LINE_LEADING_CODE = re.compile(rf"^({COURSE_CODE})\s", re.MULTILINE)
TABLE_ROW_CODE = re.compile(rf"({COURSE_CODE})\s+\d+\s+[A-Za-z]")
CCN_ROW_CODE = re.compile(rf"{CCN_TOKEN}\s+({COURSE_CODE})\s+")
TOTAL_CUS = re.compile(r"Total:?\s*(\d+)\s*(?:CUs?|competency units?|credits?)", re.IGNORECASE)
REQUIRED_CUS = re.compile(r"(\d+)\s*(?:competency units?|CUs?|credits?)\s*required", re.IGNORECASE)


class DegreePlanExtractor:
    """
    Extracts degree plans from free-text degree sections and from
    "Program:" CCN tables, then merges plans that share a name.
    """

    def __init__(self, school_keywords: Sequence[Tuple[str, Sequence[str]]] = SCHOOL_KEYWORDS):
        self.school_keywords = tuple(school_keywords)
        self.logger = setup_logger("degree_plan_extractor")

    def extract(self, text: str) -> List[DegreePlan]:
        # Catalog eras mix both layouts, so both always run
        plans = self.extract_free_text_plans(text)
        plans.extend(self.extract_table_plans(text))
        return self.deduplicate(plans)

    def extract_free_text_plans(self, text: str) -> List[DegreePlan]:
        plans = []

        matches = list(DEGREE_BLOCK.finditer(text))
        self.logger.info(f"Found {len(matches)} degree plan patterns")

        for match in matches:
            name = match.group(0).split("\n")[0].strip()
            content = match.group(2)

            code_match = PROGRAM_CODE.search(name)
            plans.append(DegreePlan(
                name=name,
                code=code_match.group(1) if code_match else None,
                courses=self.courses_from_block(content),
                total_cus=self.extract_total_cus(content),
                school=self.determine_school(name),
            ))

        return plans

    def extract_table_plans(self, text: str) -> List[DegreePlan]:
        plans = []

        matches = list(TABLE_BLOCK.finditer(text))
        self.logger.info(f"Found {len(matches)} table-based degree plans")

        for match in matches:
            name = match.group(1).strip()
            content = match.group(0)
            plans.append(DegreePlan(
                name=name,
                courses=CCN_ROW_CODE.findall(content),
                total_cus=self.extract_total_cus(content),
                school=self.determine_school(name),
            ))

        return plans

    @staticmethod
    def courses_from_block(content: str) -> List[str]:
        """Line-leading course codes, then codes from "CODE CUs Name" rows, first occurrence only."""
        courses: List[str] = []
        for code in LINE_LEADING_CODE.findall(content) + TABLE_ROW_CODE.findall(content):
            if code not in courses:
                courses.append(code)
        return courses

    @staticmethod
    def extract_total_cus(content: str) -> Optional[int]:
        match = TOTAL_CUS.search(content)
        if match:
            return int(match.group(1))

        match = REQUIRED_CUS.search(content)
        if match:
            return int(match.group(1))

        return None

    def determine_school(self, program_name: str) -> Optional[str]:
        name = program_name.lower()
        for school, keywords in self.school_keywords:
            if any(keyword in name for keyword in keywords):
                return school
        return None

    def deduplicate(self, plans: List[DegreePlan]) -> List[DegreePlan]:
        """
        Merge plans whose names match after lowercasing and collapsing whitespace.

        The plan with the longer course list is kept; a missing totalCUs is
        copied over from the other plan.
        """
        seen: Dict[str, DegreePlan] = {}

        for plan in plans:
            key = " ".join(plan.name.lower().split())
            existing = seen.get(key)
            if existing is None:
                seen[key] = plan
                continue

            if len(plan.courses) > len(existing.courses):
                kept, other = plan, existing
            else:
                kept, other = existing, plan

            if kept.total_cus is None and other.total_cus is not None:
                kept = kept.model_copy(update={'total_cus': other.total_cus})
            seen[key] = kept

        if len(seen) < len(plans):
            self.logger.info(f"Merged {len(plans) - len(seen)} duplicate degree plans")
        return list(seen.values())
