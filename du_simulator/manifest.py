"""
Import manifest generator.

Builds the version 2.0 import manifest that describes an update to the
device update service: update id, type, installed criteria, device
compatibility and the files with their sizes and SHA256 hashes.
"""

import base64
import hashlib
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional, Sequence

from du_simulator.errors import ManifestError

MANIFEST_VERSION = "2.0"

_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9.-]{1,64}$")
_UPDATE_TYPE_PATTERN = re.compile(r"^\S+/\S+:\d{1,5}$")
_INSTALLED_CRITERIA_PATTERN = re.compile(r"^\S{1,64}$")
_COMPATIBILITY_PATTERN = re.compile(r"^\S+,\S+$")


def _sha256_base64(path: Path) -> str:
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            digest.update(chunk)
    return base64.b64encode(digest.digest()).decode("ascii")


def parse_compatibility(value: str) -> dict[str, str]:
    """
    Parse a "manufacturer,model" pair.

    Raises:
        ManifestError: If the value is not exactly two non-blank fields
    """
    if not _COMPATIBILITY_PATTERN.match(value):
        raise ManifestError("Invalid compatibility specified.")
    parts = value.split(",")
    if len(parts) != 2:
        raise ManifestError("Compatibility info format is manufacturer,model.")
    return {"deviceManufacturer": parts[0], "deviceModel": parts[1]}


def describe_file(path: Path) -> dict[str, Any]:
    """Return the manifest "files" entry for one update file."""
    return {
        "filename": path.name,
        "sizeInBytes": path.stat().st_size,
        "hashes": {"sha256": _sha256_base64(path)},
    }


def create_import_manifest(
    provider: str,
    name: str,
    version: str,
    update_type: str,
    installed_criteria: str,
    compatibility: Sequence[str],
    files: Sequence[Path],
    created: Optional[datetime] = None,
) -> dict[str, Any]:
    """
    Create an import manifest.

    Args:
        provider: Update provider
        name: Update name
        version: Update version
        update_type: Update type, e.g. "microsoft/swupdate:1"
        installed_criteria: Installed criteria string
        compatibility: "manufacturer,model" pairs, at least one
        files: Update files, at least one
        created: Creation time. Defaults to now (UTC)

    Returns:
        Manifest as a JSON-serializable dict

    Raises:
        ManifestError: If any argument is missing or invalid
    """
    if not name:
        raise ManifestError("Update name not specified.")
    if not _NAME_PATTERN.match(name):
        raise ManifestError("Invalid update name specified.")

    if not update_type:
        raise ManifestError("Update type not specified.")
    if not _UPDATE_TYPE_PATTERN.match(update_type):
        raise ManifestError("Invalid update type specified.")

    if not installed_criteria:
        raise ManifestError("Installed criteria not specified.")
    if not _INSTALLED_CRITERIA_PATTERN.match(installed_criteria):
        raise ManifestError("Invalid installed criteria specified.")

    if not provider:
        raise ManifestError("Provider name not specified.")
    if not _NAME_PATTERN.match(provider):
        raise ManifestError("Invalid update provider specified.")

    if not version:
        raise ManifestError("Update version not specified.")

    if not compatibility:
        raise ManifestError("Compatibility info not specified.")
    compat_entries = [parse_compatibility(c) for c in compatibility]

    if not files:
        raise ManifestError("Update file(s) not specified.")
    paths = [Path(f) for f in files]
    for path in paths:
        if not path.is_file():
            raise ManifestError(f"File '{path}' not found.")

    if created is None:
        created = datetime.now(timezone.utc)

    return {
        "updateId": {
            "provider": provider,
            "name": name,
            "version": version,
        },
        "updateType": update_type,
        "installedCriteria": installed_criteria,
        "compatibility": compat_entries,
        "files": [describe_file(p) for p in paths],
        "createdDateTime": created.astimezone(timezone.utc).isoformat(timespec="seconds"),
        "manifestVersion": MANIFEST_VERSION,
    }
