"""
Unit tests for brand document validation.
"""

import pytest

from schooltree_brand.registry import builtin_documents
from schooltree_brand.validation import is_valid_color, validate_document


class TestIsValidColor:
    @pytest.mark.parametrize("value", ["#137fec", "#FFF", "#abcDEF"])
    def test_valid(self, value):
        assert is_valid_color(value)

    @pytest.mark.parametrize("value", ["137fec", "#12345", "#gggggg", "red", ""])
    def test_invalid(self, value):
        assert not is_valid_color(value)


class TestValidateDocument:
    def test_complete_document_passes(self, full_document):
        report = validate_document(full_document)

        assert report.valid
        assert report.brand_id == "greenvalley"
        # dashboard and profile are not listed
        assert report.warnings == [
            "Missing module config: features.modules.dashboard",
            "Missing module config: features.modules.profile",
        ]

    def test_explicit_brand_id_used_for_report(self, full_document):
        assert validate_document(full_document, "gv").brand_id == "gv"

    def test_empty_document(self):
        report = validate_document({})
        assert not report.valid
        assert report.errors == [
            f"Missing required field: {section}"
            for section in ("brand", "api", "firebase", "auth", "theme", "features")
        ]

    @pytest.mark.parametrize("brand_id", ["Green", "1school", "green-valley"])
    def test_invalid_brand_id(self, full_document, brand_id):
        full_document["brand"]["id"] = brand_id
        report = validate_document(full_document)
        assert any(error.startswith("Invalid brand.id format") for error in report.errors)

    def test_missing_brand_name(self, full_document):
        del full_document["brand"]["name"]
        assert "Missing brand.name" in validate_document(full_document).errors

    def test_missing_base_url_is_error(self, full_document):
        full_document["api"]["baseUrl"] = ""
        assert "Missing api.baseUrl" in validate_document(full_document).errors

    def test_missing_database_name_is_warning(self, full_document):
        del full_document["api"]["databaseName"]
        report = validate_document(full_document)
        assert report.valid
        assert "Missing api.databaseName" in report.warnings

    def test_invalid_auth_type(self, full_document):
        full_document["auth"]["type"] = "sms"
        report = validate_document(full_document)
        assert report.errors == ["Invalid auth.type: sms. Must be 'otp', 'password', or 'both'"]

    def test_bad_color_is_warning(self, full_document):
        full_document["theme"]["colors"]["accent"] = "yellow"
        report = validate_document(full_document)
        assert report.valid
        assert "Invalid color format for theme.colors.accent: yellow" in report.warnings

    def test_missing_recommended_color(self, full_document):
        del full_document["theme"]["colors"]["surface"]
        report = validate_document(full_document)
        assert "Missing recommended color: theme.colors.surface" in report.warnings

    def test_input_not_modified(self, full_document):
        before = repr(full_document)
        validate_document(full_document)
        assert repr(full_document) == before


class TestBuiltinBrands:
    @pytest.mark.parametrize("brand_id,document", sorted(builtin_documents().items()))
    def test_packaged_brand_is_valid(self, brand_id, document):
        report = validate_document(document, brand_id)
        assert report.valid, report.errors
