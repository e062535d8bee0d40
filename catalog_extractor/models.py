# catalog_extractor/models.py
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base for every parsed entity: frozen, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class CourseType(str, Enum):
    DEGREE_PLAN = "degree-plan"
    INDEPENDENT_STUDY = "independent-study"
    FLEXIBLE_LEARNING = "flexible-learning"


class OutcomeCategory(str, Enum):
    TECHNICAL = "technical"
    PROFESSIONAL = "professional"
    ANALYTICAL = "analytical"


class FormatVersion(Enum):
    """Extraction strategies, one per catalog era."""
    LEGACY = "v1.0"
    MODERN = "v2.0"
    ENHANCED = "v2.1"


class CatalogFormat(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: FormatVersion
    strategy: str
    year_range: Tuple[int, int]
    content_patterns: Tuple[str, ...] = ()
    table_format: str = "minimal"

    def covers_year(self, year: int) -> bool:
        low, high = self.year_range
        return low <= year <= high

    @property
    def parser_version(self) -> str:
        return f"{self.version.value}-{self.strategy}"


class Course(CatalogModel):
    code: str
    name: str
    description: Optional[str] = None
    ccn: Optional[str] = None
    competency_units: Optional[int] = None
    course_type: Optional[CourseType] = Field(default=None, alias="type")
    prerequisites: Optional[List[str]] = None
    corequisites: Optional[List[str]] = None
    alternate_versions: Optional[List[str]] = None


class DegreePlan(CatalogModel):
    name: str
    code: Optional[str] = None
    school: Optional[str] = None
    courses: List[str] = Field(default_factory=list)
    total_cus: Optional[int] = Field(default=None, alias="totalCUs")


class StandaloneCourse(CatalogModel):
    code: str
    name: str
    description: Optional[str] = None
    price: int
    competency_units: Optional[int] = None
    access_type: Optional[str] = "Self-paced"


class CertificateProgram(CatalogModel):
    code: str
    name: str
    description: Optional[str] = None
    price: int
    total_cus: Optional[int] = Field(default=None, alias="totalCUs")
    courses: Optional[List[str]] = None


class OutcomeItem(CatalogModel):
    outcome: str
    category: Optional[OutcomeCategory] = None


class ProgramOutcome(CatalogModel):
    school: str
    program: str
    outcomes: List[OutcomeItem] = Field(default_factory=list)

    @property
    def key(self) -> str:
        return f"{self.school}_{'_'.join(self.program.split())}"


class PriceRange(CatalogModel):
    min: int
    max: int


class CourseBundleInfo(CatalogModel):
    courses: List[str] = Field(default_factory=list)
    price_range: Optional[PriceRange] = None
    duration: Optional[str] = None
    access_type: Optional[str] = None


class ValidationIssue(CatalogModel):
    type: str
    severity: str
    location: str
    message: str
    details: Optional[Dict[str, Any]] = None


class DegreePlanStatistics(CatalogModel):
    total_courses: int = 0
    unique_courses: int = 0
    average_courses_per_plan: int = 0
    plans_with_total_cus: int = Field(default=0, alias="plansWithTotalCUs")
    school_distribution: Optional[Dict[str, int]] = None


class DataQuality(CatalogModel):
    courses_with_description: int = 0
    courses_with_ccn: int = Field(default=0, alias="coursesWithCCN")
    courses_with_cus: int = Field(default=0, alias="coursesWithCUs")
    complete_course_records: int = 0


class CatalogStatistics(CatalogModel):
    courses_found: int = 0
    degree_plans_found: int = 0
    standalone_courses: int = 0
    certificate_programs: int = 0
    program_outcomes: int = 0
    ccn_coverage: int = 0
    cu_coverage: int = 0
    description_coverage: int = 0
    duplicate_code_count: int = 0
    invalid_code_count: int = 0
    courses_by_prefix: Dict[str, int] = Field(default_factory=dict)
    degree_plan_statistics: Optional[DegreePlanStatistics] = None
    data_quality: Optional[DataQuality] = None


class CatalogMetadata(CatalogModel):
    catalog_date: str
    parser_version: str
    parsed_at: str
    total_pages: int = 0
    parsing_time_ms: int = 0
    detected_format: str
    stage_timings_ms: Dict[str, int] = Field(default_factory=dict)
    statistics: CatalogStatistics
    validation_issues: List[ValidationIssue] = Field(default_factory=list)


class ParsedCatalog(CatalogModel):
    courses: Dict[str, Course] = Field(default_factory=dict)
    degree_plans: List[DegreePlan] = Field(default_factory=list)
    standalone_courses: Dict[str, StandaloneCourse] = Field(default_factory=dict)
    certificate_programs: Dict[str, CertificateProgram] = Field(default_factory=dict)
    program_outcomes: Dict[str, ProgramOutcome] = Field(default_factory=dict)
    course_bundles: List[CourseBundleInfo] = Field(default_factory=list)
    metadata: CatalogMetadata
