"""Tests for the import manifest generator."""

import base64
import hashlib
from datetime import datetime, timezone

import pytest

from du_simulator.errors import ManifestError
from du_simulator.manifest import (
    MANIFEST_VERSION,
    create_import_manifest,
    parse_compatibility,
)


@pytest.fixture
def update_file(tmp_path):
    path = tmp_path / "fw-1.0.bin"
    path.write_bytes(b"firmware payload")
    return path


def _args(update_file, **overrides):
    args = {
        "provider": "Contoso",
        "name": "Toaster",
        "version": "1.0",
        "update_type": "microsoft/swupdate:1",
        "installed_criteria": "1.0",
        "compatibility": ["Contoso,Toaster"],
        "files": [update_file],
        "created": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    }
    args.update(overrides)
    return args


class TestCreateImportManifest:
    """Manifest document content."""

    def test_document(self, update_file):
        manifest = create_import_manifest(**_args(update_file))

        expected_hash = base64.b64encode(hashlib.sha256(b"firmware payload").digest()).decode()
        assert manifest == {
            "updateId": {"provider": "Contoso", "name": "Toaster", "version": "1.0"},
            "updateType": "microsoft/swupdate:1",
            "installedCriteria": "1.0",
            "compatibility": [{"deviceManufacturer": "Contoso", "deviceModel": "Toaster"}],
            "files": [
                {
                    "filename": "fw-1.0.bin",
                    "sizeInBytes": len(b"firmware payload"),
                    "hashes": {"sha256": expected_hash},
                }
            ],
            "createdDateTime": "2024-01-02T03:04:05+00:00",
            "manifestVersion": MANIFEST_VERSION,
        }

    def test_multiple_compatibility_entries(self, update_file):
        manifest = create_import_manifest(
            **_args(update_file, compatibility=["Contoso,Toaster", "Fabrikam,Kettle"])
        )
        assert [c["deviceModel"] for c in manifest["compatibility"]] == ["Toaster", "Kettle"]

    def test_created_defaults_to_now(self, update_file):
        args = _args(update_file)
        del args["created"]
        manifest = create_import_manifest(**args)
        assert manifest["createdDateTime"].endswith("+00:00")


class TestValidation:
    """Argument validation."""

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"name": ""}, "Update name not specified."),
            ({"name": "bad name"}, "Invalid update name specified."),
            ({"update_type": "swupdate"}, "Invalid update type specified."),
            ({"update_type": "microsoft/swupdate:123456"}, "Invalid update type specified."),
            ({"installed_criteria": ""}, "Installed criteria not specified."),
            ({"installed_criteria": "has space"}, "Invalid installed criteria specified."),
            ({"provider": "x" * 65}, "Invalid update provider specified."),
            ({"version": ""}, "Update version not specified."),
            ({"compatibility": []}, "Compatibility info not specified."),
            ({"files": []}, "Update file(s) not specified."),
        ],
    )
    def test_invalid_arguments(self, update_file, overrides, message):
        with pytest.raises(ManifestError) as exc_info:
            create_import_manifest(**_args(update_file, **overrides))
        assert str(exc_info.value) == message

    def test_missing_file(self, update_file, tmp_path):
        missing = tmp_path / "missing.bin"
        with pytest.raises(ManifestError, match="not found"):
            create_import_manifest(**_args(update_file, files=[missing]))


class TestParseCompatibility:
    """manufacturer,model parsing."""

    def test_valid(self):
        assert parse_compatibility("Contoso,Toaster") == {
            "deviceManufacturer": "Contoso",
            "deviceModel": "Toaster",
        }

    @pytest.mark.parametrize("value", ["Contoso", "Contoso, Toaster", ",Toaster"])
    def test_invalid(self, value):
        with pytest.raises(ManifestError, match="Invalid compatibility specified."):
            parse_compatibility(value)

    def test_three_fields(self):
        with pytest.raises(ManifestError, match="manufacturer,model"):
            parse_compatibility("a,b,c")
