import os

# Keep test runs from writing log files into the project tree
os.environ.setdefault("CATALOG_LOG_TO_FILE", "false")

import pytest  # noqa: E402

LONG_DESCRIPTION = ("Information technology foundations " * 4)[:120]

E2E_CATALOG = (
    "CCN Course Number Course Description\n"
    "ITEC 1010 C182 3 Introduction to IT\n"
    "\n"
    "C182 - Intro to IT - Short desc\n"
    "\n"
    "Course Descriptions\n"
    f"C182 - Intro to IT - {LONG_DESCRIPTION}\n"
)

ENHANCED_CATALOG = """Institutional Catalog 2025

Program: Bachelor of Science in Data Analytics
CCN Course Number Course Description
DTAN 1000 C100 Introduction to Data
DTAN 2000 C200 Statistics for Analysts
ITEC 3000 C300 Data Visualization
Total: 120 CUs

C100 3 Introduction to Data
C200 4 Statistics for Analysts
C300 15 Data Visualization

C100 - Introduction to Data - Short intro
C200 - Statistics for Analysts - Prerequisite: C100. Covers probability and inference for working analysts.
C300 - Data Visualization - Visual storytelling

Standalone Courses
Bundle pricing from $1,000 - $2,000 with 6 months access
C400 - Ethics in Data $500 (2 CUs)

Certificate Programs
Data Foundations - Includes C100 and C200 $2,500 (7 CUs)

Course Descriptions
C100 - Introduction to Data - This course introduces data literacy, the data lifecycle and ethical use of information in organizations.
C300 - Data Visualization - Students design dashboards and charts that communicate findings clearly to decision makers.

Program Outcomes
School of Technology
Bachelor of Science in Data Analytics:
• Apply programming techniques to clean data
• Conduct statistical analysis
"""


@pytest.fixture
def e2e_catalog():
    return E2E_CATALOG


@pytest.fixture
def enhanced_catalog():
    return ENHANCED_CATALOG
