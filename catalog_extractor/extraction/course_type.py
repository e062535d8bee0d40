import re
from typing import Callable, Optional, Sequence

from ..constants import FLEXIBLE_LEARNING_KEYWORDS, INDEPENDENT_STUDY_KEYWORDS
from ..models import CourseType
from .sections import is_valid_course_code

# (code, name, ccn, description) -> CourseType
CourseTypeClassifier = Callable[[str, Optional[str], Optional[str], Optional[str]], CourseType]

FLEXIBLE_CODE_PATTERNS = (
    re.compile(r"^[A-Z]{3,4}\d+$"),
    re.compile(r"^[A-Z]{2,4}[A-Z]\d+$"),
    re.compile(r"^[A-Z]{3,6}$"),
    re.compile(r"^[A-Z]+\d+[A-Z]+$"),
)


class KeywordCourseTypeClassifier:
    """
    Default course type policy: keywords in the name and description first,
    then the shape of the course code.
    """

    def __init__(self,
                 independent_study_keywords: Sequence[str] = INDEPENDENT_STUDY_KEYWORDS,
                 flexible_keywords: Sequence[str] = FLEXIBLE_LEARNING_KEYWORDS):
        self.independent_study_keywords = tuple(independent_study_keywords)
        self.flexible_keywords = tuple(flexible_keywords)

    def __call__(self,
                 code: str,
                 name: Optional[str] = None,
                 ccn: Optional[str] = None,
                 description: Optional[str] = None) -> CourseType:
        combined = f"{(name or '').upper()} {(description or '').upper()}"

        if any(keyword in combined for keyword in self.independent_study_keywords):
            return CourseType.INDEPENDENT_STUDY
        if any(keyword in combined for keyword in self.flexible_keywords):
            return CourseType.FLEXIBLE_LEARNING
        if not is_valid_course_code(code) and any(p.match(code) for p in FLEXIBLE_CODE_PATTERNS):
            return CourseType.FLEXIBLE_LEARNING
        return CourseType.DEGREE_PLAN
