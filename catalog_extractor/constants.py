from .models import CatalogFormat, FormatVersion, OutcomeCategory

# Ordered oldest to newest; the last entry is the fallback format.
CATALOG_FORMATS = (
    CatalogFormat(
        version=FormatVersion.LEGACY,
        strategy="embedded-ccn",
        year_range=(2017, 2020),
        content_patterns=(
            "embedded CCN in course descriptions",
            "inline course codes without tables",
        ),
        table_format="minimal",
    ),
    CatalogFormat(
        version=FormatVersion.MODERN,
        strategy="structured-tables",
        year_range=(2021, 2023),
        content_patterns=(
            "CCN in dedicated tables",
            "structured degree plan tables",
            "clear course/CCN separation",
        ),
        table_format="structured",
    ),
    CatalogFormat(
        version=FormatVersion.ENHANCED,
        strategy="enhanced-structured",
        year_range=(2024, 2030),
        content_patterns=(
            "enhanced table formatting",
            "program outcomes section",
            "standalone courses section",
            "certificate programs with pricing",
        ),
        table_format="enhanced",
    ),
)

# Course names that lose their first letter when the code and name are run together
TRUNCATION_FIXES = (
    ("ublic Health", "Public Health"),
    ("roject Management", "Project Management"),
    ("roblem Solving", "Problem Solving"),
    ("usiness", "Business"),
    ("anagement", "Management"),
    ("ommunication", "Communication"),
    ("undamentals", "Fundamentals"),
    ("ntroduction", "Introduction"),
    ("evelopment", "Development"),
    ("rogramming", "Programming"),
)

# Checked in order, first match wins
SCHOOL_KEYWORDS = (
    ("School of Technology", ("technology", "computer", "software", "data", "cyber")),
    ("School of Business", ("business", "management", "marketing", "accounting", "mba")),
    ("School of Health", ("health", "nursing", "medical")),
    ("School of Education", ("education", "teaching", "curriculum")),
)

OUTCOME_SCHOOLS = ("Business", "Health", "Technology", "Education")

OUTCOME_KEYWORDS = (
    (OutcomeCategory.TECHNICAL, ("technical", "programming", "software")),
    (OutcomeCategory.PROFESSIONAL, ("professional", "communication", "leadership")),
    (OutcomeCategory.ANALYTICAL, ("analytical", "analysis", "research")),
)

INDEPENDENT_STUDY_KEYWORDS = ("INDEPENDENT STUDY", "SELF-STUDY")
FLEXIBLE_LEARNING_KEYWORDS = ("FLEXIBLE", "COMPETENCY-BASED")

STANDALONE_ACCESS_TYPE = "Self-paced"
