from typing import Dict, Optional, Any
import json
import re
import pandas as pd
from datetime import datetime
from pathlib import Path

from ..utils import DataExtractionError
from ..utils.logger import setup_logger

CATALOG_FILENAME = re.compile(r"^catalog-(\d{4}-\d{2})\.json$")


class CatalogCourseMerger:
    """
    Merge course definitions from several parsed catalogs into one course list.

    Catalogs are applied oldest first, so the newest catalog's name, CCN and
    CUs win; the longest description seen is kept.
    """

    def __init__(self):
        self.catalogs: Dict[str, Dict[str, Any]] = {}
        self.merged_data: Dict[str, Dict[str, Any]] = {}
        self.logger = setup_logger("course_merger")

    def load_catalog(self, catalog_date: str, catalog: Dict[str, Any]) -> None:
        """
        Load one parsed catalog.

        Args:
            catalog_date: Catalog date, e.g. "2024-08"
            catalog: Parsed catalog as a dict (ParsedCatalog.to_dict())
        """
        if not isinstance(catalog.get('courses'), dict):
            self.logger.warning(f"Catalog {catalog_date} has no courses, skipping")
            return
        self.catalogs[catalog_date] = catalog
        self.logger.info(f"Loaded {len(catalog['courses'])} courses from catalog {catalog_date}")

    def load_directory(self, parsed_dir: Path) -> None:
        """Load every catalog-YYYY-MM.json file in a directory."""
        parsed_dir = Path(parsed_dir)
        for path in sorted(parsed_dir.glob("catalog-*.json")):
            match = CATALOG_FILENAME.match(path.name)
            if not match:
                continue
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.warning(f"Failed to load {path.name}: {str(e)}")
                continue
            self.load_catalog(match.group(1), data)

    def merge_courses(self) -> Dict[str, Dict[str, Any]]:
        """
        Merge all loaded catalogs.

        Returns:
            Courses keyed by lower-cased course code, sorted by code
        """
        if not self.catalogs:
            raise DataExtractionError("No catalogs loaded to merge")

        merged: Dict[str, Dict[str, Any]] = {}

        for catalog_date in sorted(self.catalogs):
            for code, course in self.catalogs[catalog_date]['courses'].items():
                code = course.get('code') or code
                key = code.lower()
                existing = merged.get(key)

                if existing is None:
                    merged[key] = {
                        'id': key,
                        'code': code,
                        'name': course.get('name') or code,
                        'description': course.get('description'),
                        'ccn': course.get('ccn'),
                        'competencyUnits': course.get('competencyUnits'),
                        'catalogVersions': [catalog_date],
                        'lastUpdated': catalog_date,
                    }
                    continue

                existing['catalogVersions'].append(catalog_date)
                existing['lastUpdated'] = catalog_date
                if course.get('name'):
                    existing['name'] = course['name']
                description = course.get('description')
                if description and len(description) > len(existing.get('description') or ''):
                    existing['description'] = description
                if course.get('ccn'):
                    existing['ccn'] = course['ccn']
                if isinstance(course.get('competencyUnits'), int):
                    existing['competencyUnits'] = course['competencyUnits']

        self.merged_data = {
            key: merged[key] for key in sorted(merged, key=lambda k: merged[k]['code'])
        }
        self._log_merge_statistics()
        return self.merged_data

    def _log_merge_statistics(self) -> None:
        stats = self.get_statistics()
        self.logger.info("Merge Statistics:")
        for key, value in stats.items():
            self.logger.info(f"{key}: {value}")

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about the merged data.
        """
        stats = {
            'catalogs_loaded': len(self.catalogs),
            'total_merged_courses': len(self.merged_data),
            'timestamp': datetime.now().isoformat()
        }

        if self.merged_data:
            df = pd.DataFrame(list(self.merged_data.values()))
            stats.update({
                'courses_in_every_catalog': int((df['catalogVersions'].map(len) == len(self.catalogs)).sum()),
                'ccn_coverage': int(round(df['ccn'].notna().mean() * 100)),
                'avg_competency_units': float(df['competencyUnits'].mean()) if df['competencyUnits'].notna().any() else 0.0,
            })

        return stats

    def build_output(self) -> Dict[str, Any]:
        return {
            'metadata': {
                'generatedAt': datetime.now().isoformat(),
                'totalCourses': len(self.merged_data),
                'catalogVersionsIncluded': sorted(self.catalogs),
            },
            'courses': self.merged_data,
        }

    def save_to_json(self, output_path: Path) -> Optional[Path]:
        """
        Save merged data to a JSON file.
        """
        if not self.merged_data:
            self.logger.warning("No merged data available to save")
            return None

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.build_output(), f, indent=2)
            f.write("\n")
        self.logger.info(f"Successfully saved {len(self.merged_data)} merged courses to {output_path}")
        return output_path
