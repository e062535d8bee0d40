import json
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from ..models import ParsedCatalog
from ..utils.logger import setup_logger

logger = setup_logger("catalog_report")

COURSE_COLUMNS = ["code", "name", "ccn", "competencyUnits", "type", "description"]


def generate_parsing_report(catalog: ParsedCatalog, filename: str) -> Dict[str, Any]:
    """
    Summarize parse quality for one catalog.

    Args:
        catalog: Result of CatalogParser
        filename: Source catalog filename

    Returns:
        Report dict with summary, degree plan validation and data completeness
    """
    metadata = catalog.metadata
    statistics = metadata.statistics

    plan_courses = {code for plan in catalog.degree_plans for code in plan.courses}
    missing = sorted(code for code in plan_courses if code not in catalog.courses)
    found = len(plan_courses) - len(missing)
    validation_rate = round(found / len(plan_courses) * 100, 1) if plan_courses else 0.0

    features = []
    if catalog.program_outcomes:
        features.append("program_outcomes")
    if catalog.standalone_courses:
        features.append("standalone_courses")
    if catalog.certificate_programs:
        features.append("certificate_programs")

    courses = list(catalog.courses.values())
    return {
        "filename": filename,
        "parsedAt": metadata.parsed_at,
        "parserVersion": metadata.parser_version,
        "summary": {
            "totalCourses": statistics.courses_found,
            "totalDegreePlans": statistics.degree_plans_found,
            "totalProgramOutcomes": statistics.program_outcomes,
            "ccnCoverage": statistics.ccn_coverage,
            "cuCoverage": statistics.cu_coverage,
            "descriptionCoverage": statistics.description_coverage,
            "duplicateCodes": statistics.duplicate_code_count,
            "invalidCodes": statistics.invalid_code_count,
            "validationIssues": len(metadata.validation_issues),
            "parsingDuration": metadata.parsing_time_ms,
        },
        "validation": {
            "degreePlanCourseValidation": {
                "uniqueCoursesInPlans": len(plan_courses),
                "coursesFoundInCatalog": found,
                "missingCourses": missing,
                "validationRate": validation_rate,
            },
            "dataCompleteness": {
                "coursesWithAllFields": sum(
                    1 for c in courses if c.name and c.description and c.ccn and c.competency_units
                ),
                "degreePlansWithTotalCUs": sum(1 for plan in catalog.degree_plans if plan.total_cus),
            },
            "issues": [issue.to_dict() for issue in metadata.validation_issues],
        },
        "statistics": statistics.to_dict(),
        "processingDetails": {
            "formatDetected": metadata.detected_format,
            "stageTimingsMs": metadata.stage_timings_ms,
            "enhancedFeaturesUsed": features,
        },
    }


def courses_dataframe(catalog: ParsedCatalog) -> pd.DataFrame:
    rows = [course.to_dict() for course in catalog.courses.values()]
    df = pd.DataFrame(rows, columns=COURSE_COLUMNS)
    return df.sort_values("code").reset_index(drop=True)


def save_courses_csv(catalog: ParsedCatalog, output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = courses_dataframe(catalog)
    df.to_csv(output_path, index=False)
    logger.info(f"Saved {len(df)} courses to {output_path}")
    return output_path


def save_json(data: Dict[str, Any], output_path: Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    logger.info(f"Saved {output_path}")
    return output_path
