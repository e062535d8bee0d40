import pytest

from catalog_extractor.constants import CATALOG_FORMATS
from catalog_extractor.extraction.detector import CatalogFormatDetector, extract_year
from catalog_extractor.models import FormatVersion


@pytest.mark.parametrize("catalog_format", CATALOG_FORMATS, ids=lambda f: f.version.value)
def test_year_only_detection_picks_format_covering_year(catalog_format):
    low, high = catalog_format.year_range
    for year in (low, high):
        detector = CatalogFormatDetector(f"catalog-{year}-08.pdf")
        assert detector.detect() == catalog_format


def test_extract_year_from_filename():
    assert extract_year("catalog-2019-03.pdf") == 2019
    assert extract_year("WGU_Catalog_2023_July.pdf") == 2023


def test_year_match_confirmed_by_content():
    sample = "C182 (ITEC 1010) Introduction to IT"
    detector = CatalogFormatDetector("catalog-2018-01.pdf", sample)
    assert detector.detect().version is FormatVersion.LEGACY


def test_content_mismatch_falls_back_to_signature_scan():
    sample = "CCN Course Number Course Description\nITEC 1010 C182 Intro"
    detector = CatalogFormatDetector("catalog-2018-01.pdf", sample)
    assert detector.detect().version is FormatVersion.MODERN


def test_enhanced_signature_from_headings():
    detector = CatalogFormatDetector("catalog-2019-01.pdf", "Standalone Courses\nC100 - Stats $500")
    assert detector.detect().version is FormatVersion.ENHANCED


def test_no_match_returns_newest_format():
    detector = CatalogFormatDetector("catalog-1999-01.pdf", "nothing recognizable here")
    assert detector.detect() == CATALOG_FORMATS[-1]

    detector = CatalogFormatDetector("catalog-1999-01.pdf")
    assert detector.detect() == CATALOG_FORMATS[-1]


def test_custom_registry_is_used():
    legacy_only = (CATALOG_FORMATS[0],)
    detector = CatalogFormatDetector("catalog-2025-01.pdf", formats=legacy_only)
    assert detector.detect() == CATALOG_FORMATS[0]


def test_format_info_mentions_version_and_strategy():
    detector = CatalogFormatDetector("catalog-2022-01.pdf")
    info = detector.format_info()
    assert "v2.0" in info
    assert "structured-tables" in info
    assert "2021-2023" in info


def test_legacy_bracketed_ccn_matches_signature():
    sample = "C182 - Introduction to IT (3 credits) [ITEC 1010]\n"
    detector = CatalogFormatDetector("catalog-2019-01.pdf", sample)
    assert detector.detect().version is FormatVersion.LEGACY
