import pytest

from catalog_extractor.constants import CATALOG_FORMATS
from catalog_extractor.extraction.course_parser import CourseExtractor
from catalog_extractor.extraction.course_type import KeywordCourseTypeClassifier
from catalog_extractor.models import CourseType

LEGACY, MODERN, ENHANCED = CATALOG_FORMATS


@pytest.fixture
def extractor():
    return CourseExtractor()


def test_legacy_lines_each_yield_a_course(extractor):
    text = (
        "C182 - Introduction to IT (3 credits) [ITEC 1010]\n"
        "C173 - Scripting and Programming (3 competency units)\n"
        "C955 – Applied Probability and Statistics (4 credits) [MATH 1200]\n"
    )
    courses = extractor.extract(text, LEGACY, {}, {}, {})

    assert [c.code for c in courses] == ["C182", "C173", "C955"]
    intro = courses[0]
    assert intro.name == "Introduction to IT"
    assert intro.competency_units == 3
    assert intro.ccn == "ITEC 1010"
    assert intro.description is None
    assert courses[1].ccn is None
    assert courses[2].ccn == "MATH 1200"


def test_legacy_ignores_lookup_maps(extractor):
    text = "C182 - Introduction to IT (3 credits)\n"
    courses = extractor.extract(text, LEGACY, {"C182": "ITEC 9999"}, {"C182": 9}, {"C182": "x" * 80})
    assert courses[0].ccn is None
    assert courses[0].competency_units == 3


def test_modern_enriches_from_maps(extractor):
    text = "C182 - Introduction to IT - Short blurb\n"
    courses = extractor.extract(
        text, MODERN,
        ccn_map={"C182": "ITEC 1010"},
        cu_map={"C182": 3},
        description_map={"C182": "Detailed description from the descriptions section."},
    )

    assert len(courses) == 1
    course = courses[0]
    assert course.ccn == "ITEC 1010"
    assert course.competency_units == 3
    assert course.description == "Detailed description from the descriptions section."
    assert course.course_type == CourseType.DEGREE_PLAN


def test_modern_inline_description_needs_minimum_length(extractor):
    long_inline = "An inline description that is comfortably longer than fifty characters."
    text = (
        "C100 - Short One - Too short to keep\n"
        f"C200 - Long One - {long_inline}\n"
    )
    courses = extractor.extract(text, MODERN, {}, {}, {})
    by_code = {c.code: c for c in courses}

    assert by_code["C100"].description is None
    assert by_code["C200"].description == long_inline


def test_modern_inline_units_fallback(extractor):
    text = (
        "C100 - Networking - Covers routing and switching fundamentals, 4 competency units total.\n"
        "C200 - Capstone - Worth 40 credits of effort for the final project in the program.\n"
    )
    courses = {c.code: c for c in extractor.extract(text, MODERN, {}, {}, {})}

    assert courses["C100"].competency_units == 4
    assert courses["C200"].competency_units is None


def test_concatenated_line_with_truncated_name(extractor):
    text = "D627Public Health Education and Promotion34\n"
    courses = extractor.extract(text, ENHANCED, {"D627": "HLTH 3100"}, {}, {})

    assert len(courses) == 1
    course = courses[0]
    assert course.code == "D627"
    assert course.name == "Public Health Education and Promotion"
    assert course.competency_units == 3
    assert course.ccn == "HLTH 3100"


def test_concatenated_out_of_range_units_are_dropped(extractor):
    text = "D500Advanced Topics in Research154\n"
    assert extractor.extract(text, MODERN, {}, {}, {}) == []


def test_fix_truncated_name_keeps_untruncated_names(extractor):
    assert extractor.fix_truncated_name("C715", "Organizational Behavior") == ("C715", "Organizational Behavior")
    assert extractor.fix_truncated_name("C715B", "usiness Law") == ("C715", "Business Law")
    assert extractor.fix_truncated_name("C715", "usiness Law") == ("C715", "Business Law")


def test_requisites_parsed_from_description(extractor):
    text = "C200 - Statistics - Prerequisite: C100 and C101. Corequisites: C150. Inference for analysts.\n"
    course = extractor.extract(text, MODERN, {}, {}, {})[0]

    assert course.prerequisites == ["C100", "C101"]
    assert course.corequisites == ["C150"]


def test_alternate_versions_link_lettered_codes(extractor):
    text = (
        "C182 - Introduction to IT - Short blurb\n"
        "C182A - Introduction to IT Lab - Short blurb\n"
        "C182B - Introduction to IT Studio - Short blurb\n"
    )
    courses = {c.code: c for c in extractor.extract(text, MODERN, {}, {}, {})}

    assert courses["C182"].alternate_versions == ["C182A", "C182B"]
    assert courses["C182A"].alternate_versions is None


def test_custom_classifier_is_used():
    def everything_flexible(code, name, ccn, description):
        return CourseType.FLEXIBLE_LEARNING

    extractor = CourseExtractor(classifier=everything_flexible)
    course = extractor.extract("C182 - Intro - Blurb\n", MODERN, {}, {}, {})[0]
    assert course.course_type == CourseType.FLEXIBLE_LEARNING


@pytest.mark.parametrize("code, name, description, expected", [
    ("C182", "Introduction to IT", None, CourseType.DEGREE_PLAN),
    ("C999", "Independent Study in Ethics", None, CourseType.INDEPENDENT_STUDY),
    ("C998", "Capstone", "A flexible, competency-based project", CourseType.FLEXIBLE_LEARNING),
    ("ABC123", "Elective", None, CourseType.FLEXIBLE_LEARNING),
    ("ABCD", "Elective", None, CourseType.FLEXIBLE_LEARNING),
])
def test_keyword_classifier(code, name, description, expected):
    assert KeywordCourseTypeClassifier()(code, name, None, description) == expected
