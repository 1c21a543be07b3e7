"""Read-modify-write of the generated project's ``package.json``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from nestcord.errors import FileSystemError
from nestcord.utils import get_logger, load_json, save_json

logger = get_logger(__name__)

MANIFEST_NAME = "package.json"
MANIFEST_LABEL = "Updating package.json description"


async def update_manifest_description(
    project_dir: str | Path,
    description: str,
) -> dict[str, Any]:
    """Set the ``description`` field of ``<project_dir>/package.json``.

    Every other field keeps its value and position.  Returns the updated
    document.

    Raises:
        FileSystemError: If the file is missing, is not a JSON object, or
            cannot be written back.
    """
    path = Path(project_dir) / MANIFEST_NAME
    try:
        manifest = load_json(path)
        manifest["description"] = description
        await save_json(manifest, path)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        raise FileSystemError(MANIFEST_LABEL, path, exc) from exc

    logger.debug("Set description of %s", path)
    return manifest
