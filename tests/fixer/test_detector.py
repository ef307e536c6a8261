"""
Tests for PackageDetector.

Each check is exercised on a valid package with a single defect applied.
"""

import pytest

from requirement_template.fixer.detector import PackageDetector, inspect_package
from requirement_template.fixer.report import ValidationLevel

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
REL_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
STYLES_REL = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/styles"


def _with(entries, **changes):
    """Copy of entries with replacements; a None value removes the entry."""
    result = dict(entries)
    for name, content in changes.items():
        result[name] = content
    return {name: content for name, content in result.items() if content is not None}


def _document_rels(target, external=False):
    mode = ' TargetMode="External"' if external else ""
    return (
        f'<Relationships xmlns="{REL_NS}">'
        f'<Relationship Id="rId1" Type="{STYLES_REL}" Target="{target}"{mode}/>'
        '</Relationships>'
    )


@pytest.mark.unit
class TestPackageDetector:
    """Test cases for PackageDetector."""

    def test_valid_package(self, make_archive, sample_zip_content):
        report = PackageDetector(make_archive(sample_zip_content)).inspect()

        assert not report.needs_fix
        assert not report.has_leading_slash_targets
        assert not report.needs_repair
        assert report.issues == []

    def test_manifest_without_xml_default(self, make_archive, sample_zip_content):
        manifest = sample_zip_content["[Content_Types].xml"].replace(
            '<Default Extension="xml" ContentType="application/xml"/>', ""
        )
        report = inspect_package(make_archive(_with(sample_zip_content, **{"[Content_Types].xml": manifest})))

        assert report.needs_fix
        assert not report.has_leading_slash_targets
        assert any("extension xml" in issue.message for issue in report.issues)

    @pytest.mark.parametrize("part_name", ["/word/document.xml", "/word/styles.xml", "/word/numbering.xml"])
    def test_manifest_without_required_override(self, make_archive, sample_zip_content, part_name):
        manifest = "\n".join(
            line for line in sample_zip_content["[Content_Types].xml"].splitlines()
            if f'PartName="{part_name}"' not in line
        )
        report = inspect_package(make_archive(_with(sample_zip_content, **{"[Content_Types].xml": manifest})))

        assert report.needs_fix
        assert report.issues[0].details == {"part": part_name}

    def test_settings_override_is_not_required(self, make_archive, sample_zip_content):
        manifest = "\n".join(
            line for line in sample_zip_content["[Content_Types].xml"].splitlines()
            if "/word/settings.xml" not in line
        )
        report = inspect_package(make_archive(_with(sample_zip_content, **{"[Content_Types].xml": manifest})))

        assert not report.needs_repair

    def test_malformed_manifest(self, make_archive, sample_zip_content):
        report = inspect_package(make_archive(_with(sample_zip_content, **{"[Content_Types].xml": "<Types"})))

        assert report.needs_fix
        assert report.issues[0].part_name == "[Content_Types].xml"

    def test_absent_manifest_gives_no_evidence(self, make_archive, sample_zip_content):
        report = inspect_package(make_archive(_with(sample_zip_content, **{"[Content_Types].xml": None})))

        assert not report.needs_fix

    def test_absent_relationships_give_no_evidence(self, make_archive, sample_zip_content):
        entries = _with(sample_zip_content, **{"word/_rels/document.xml.rels": None})
        report = inspect_package(make_archive(entries))

        assert not report.has_leading_slash_targets

    def test_absolute_document_target(self, make_archive, sample_zip_content):
        entries = _with(sample_zip_content, **{
            "word/_rels/document.xml.rels": _document_rels("/word/styles.xml"),
        })
        report = inspect_package(make_archive(entries))

        assert report.has_leading_slash_targets
        assert not report.needs_fix
        assert report.needs_repair

    def test_absolute_package_target(self, make_archive, sample_zip_content):
        rels = sample_zip_content["_rels/.rels"].replace('Target="word/document.xml"',
                                                         'Target="/word/document.xml"')
        report = inspect_package(make_archive(_with(sample_zip_content, **{"_rels/.rels": rels})))

        assert report.has_leading_slash_targets
        assert report.issues[0].details == {"target": "/word/document.xml"}

    def test_external_target_is_ignored(self, make_archive, sample_zip_content):
        entries = _with(sample_zip_content, **{
            "word/_rels/document.xml.rels": _document_rels("/word/elsewhere.xml", external=True),
        })
        report = inspect_package(make_archive(entries))

        assert not report.has_leading_slash_targets

    def test_other_absolute_targets_are_ignored(self, make_archive, sample_zip_content):
        entries = _with(sample_zip_content, **{
            "word/_rels/document.xml.rels": _document_rels("/media/image1.png"),
        })
        report = inspect_package(make_archive(entries))

        assert not report.has_leading_slash_targets

    def test_malformed_relationships(self, make_archive, sample_zip_content):
        entries = _with(sample_zip_content, **{"word/_rels/document.xml.rels": "<Relationships"})
        report = inspect_package(make_archive(entries))

        assert report.has_leading_slash_targets
        assert not report.needs_fix

    def test_undeclared_style(self, make_archive, sample_zip_content):
        document = sample_zip_content["word/document.xml"].replace("Requirement1", "Requirement9")
        report = inspect_package(make_archive(_with(sample_zip_content, **{"word/document.xml": document})))

        assert report.needs_fix
        assert report.missing_styles == ["Requirement9"]
        assert report.get_errors()[0].details == {"styles": ["Requirement9"]}

    def test_absent_styles_part(self, make_archive, sample_zip_content):
        report = inspect_package(make_archive(_with(sample_zip_content, **{"word/styles.xml": None})))

        assert report.needs_fix
        assert report.missing_styles == ["Heading1", "Requirement1"]

    def test_absent_document_part(self, make_archive, sample_zip_content):
        report = inspect_package(make_archive(_with(sample_zip_content, **{"word/document.xml": None})))

        assert not report.needs_repair

    @pytest.mark.parametrize("part_name", ["word/styles.xml", "word/document.xml"])
    def test_malformed_content_part(self, make_archive, sample_zip_content, part_name):
        report = inspect_package(make_archive(_with(sample_zip_content, **{part_name: f'<w:styles xmlns:w="{W_NS}">'})))

        assert report.needs_fix
        assert report.missing_styles == []
        assert report.issues[0].part_name == part_name

    def test_report_to_dict(self, make_archive, sample_zip_content):
        document = sample_zip_content["word/document.xml"].replace("Heading1", "Missing")
        report = inspect_package(make_archive(_with(sample_zip_content, **{"word/document.xml": document})))
        data = report.to_dict()

        assert data["needs_fix"] is True
        assert data["has_leading_slash_targets"] is False
        assert data["needs_repair"] is True
        assert data["missing_styles"] == ["Missing"]
        assert data["issues"][0]["level"] == ValidationLevel.ERROR.value
        assert data["issues"][0]["part_name"] == "word/document.xml"
