import pytest

from catalog_extractor.extraction.degree_plan_parser import DegreePlanExtractor
from catalog_extractor.models import DegreePlan


@pytest.fixture
def extractor():
    return DegreePlanExtractor()


def test_free_text_plan(extractor):
    text = (
        "Bachelor of Science in Cybersecurity (BSCSIA)\n"
        "C182 Introduction to IT\n"
        "C173 Scripting and Programming\n"
        "C836 4 Fundamentals of Information Security\n"
        "This program requires 121 competency units required for graduation\n"
        "\n"
        "Course Descriptions\n"
    )
    plans = extractor.extract(text)

    assert len(plans) == 1
    plan = plans[0]
    assert plan.name == "Bachelor of Science in Cybersecurity (BSCSIA)"
    assert plan.code == "BSCSIA"
    assert plan.courses == ["C182", "C173", "C836"]
    assert plan.total_cus == 121
    assert plan.school == "School of Technology"


def test_table_plan(extractor):
    text = (
        "Program: MBA Healthcare Management\n"
        "CCN Course Number Course Description\n"
        "BUS 5000 C200 Leadership\n"
        "HLTH 5100 C210 Healthcare Systems\n"
        "Total: 36 CUs\n"
    )
    plans = extractor.extract_table_plans(text)

    assert len(plans) == 1
    assert plans[0].name == "MBA Healthcare Management"
    assert plans[0].courses == ["C200", "C210"]
    assert plans[0].total_cus == 36
    assert plans[0].school == "School of Business"


def test_free_text_and_table_versions_merge(enhanced_catalog, extractor):
    plans = extractor.extract(enhanced_catalog)

    assert len(plans) == 1
    assert plans[0].name == "Bachelor of Science in Data Analytics"
    assert plans[0].courses == ["C100", "C200", "C300"]
    assert plans[0].total_cus == 120


@pytest.mark.parametrize("reverse", [False, True])
def test_deduplicate_keeps_longer_list_and_fills_total(extractor, reverse):
    longer = DegreePlan(name="Bachelor of Arts in Teaching", courses=["C1", "C2", "C3", "C4", "C5"])
    shorter = DegreePlan(name="bachelor of  arts in teaching", courses=["C1", "C2", "C3"], total_cus=120)
    plans = [shorter, longer] if reverse else [longer, shorter]

    merged = extractor.deduplicate(plans)

    assert len(merged) == 1
    assert merged[0].courses == ["C1", "C2", "C3", "C4", "C5"]
    assert merged[0].total_cus == 120


def test_deduplicate_leaves_distinct_plans(extractor):
    plans = [
        DegreePlan(name="Bachelor of Science Nursing", courses=["C100"]),
        DegreePlan(name="Master of Science Nursing", courses=["C200"]),
    ]
    assert extractor.deduplicate(plans) == plans


@pytest.mark.parametrize("content, expected", [
    ("Total: 120 CUs", 120),
    ("Total 36 competency units", 36),
    ("Total: 30 credits", 30),
    ("A minimum of 34 competency units required", 34),
    ("No totals listed", None),
])
def test_extract_total_cus(content, expected):
    assert DegreePlanExtractor.extract_total_cus(content) == expected


@pytest.mark.parametrize("name, school", [
    ("Bachelor of Science in Software Engineering", "School of Technology"),
    ("Master of Business Administration", "School of Business"),
    ("Bachelor of Science in Nursing", "School of Health"),
    ("Master of Arts in Teaching", "School of Education"),
    ("Bachelor of Arts in Philosophy", None),
])
def test_determine_school(extractor, name, school):
    assert extractor.determine_school(name) == school


def test_courses_from_block_keeps_first_occurrence_order():
    content = "C300 Capstone\nC100 Intro\nC300 3 Capstone\nC200 4 Statistics\n"
    assert DegreePlanExtractor.courses_from_block(content) == ["C300", "C100", "C200"]


def test_title_with_colon_is_kept(extractor):
    text = "Bachelor of Science: Computer Science\nC182 3 Intro to IT\nTotal: 120 CUs\n"
    plans = extractor.extract(text)

    assert len(plans) == 1
    assert plans[0].name == "Bachelor of Science: Computer Science"
    assert plans[0].courses == ["C182"]
    assert plans[0].total_cus == 120
    assert plans[0].school == "School of Technology"


@pytest.mark.parametrize("heading", [
    "Bachelor of Science in Data Analytics:",
    "Bachelor of Science in Data Analytics: ",
])
def test_outcome_headings_are_not_plans(extractor, heading):
    text = f"{heading}\n• Apply programming techniques to clean data\n"
    assert extractor.extract_free_text_plans(text) == []
