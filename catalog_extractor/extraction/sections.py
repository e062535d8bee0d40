"""
Helpers for locating named sections in catalog text.
"""

import re
from typing import Iterable, Optional

# Internal course code, e.g. C182 or D627A
COURSE_CODE = r"[A-Z]\d{3,4}[A-Z]?"
# Cross-institution number, e.g. ITEC 1010
CCN_TOKEN = r"[A-Z]{2,4}\s+\d{3,5}[A-Z]?"

VALID_COURSE_CODE = re.compile(rf"^{COURSE_CODE}$")


def find_section(text: str, heading: str, stop_headings: Iterable[str]) -> Optional[str]:
    """
    Return the body of a section: everything after the heading line up to the
    next line starting with one of ``stop_headings``, or the end of the text.

    Args:
        text: Full catalog text
        heading: Regex for the heading, matched case-insensitively
        stop_headings: Regexes for headings that end the section

    Returns:
        The section body, or None when the heading is absent
    """
    stops = "|".join(stop_headings)
    pattern = rf"{heading}\s*\n(.*?)(?=\n\s*(?:{stops})|\Z)"
    match = re.search(pattern, text, re.IGNORECASE | re.DOTALL)
    if not match:
        return None
    return match.group(1)


def normalize_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def is_valid_course_code(code: str) -> bool:
    return bool(VALID_COURSE_CODE.match(code))
