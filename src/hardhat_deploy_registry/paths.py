"""Path management utilities for hardhat-deploy-registry library."""

import os
from pathlib import Path
from typing import List, Optional, Union

from .constants import EXPORT_DIR_ENV
from .exceptions import ConfigurationError, ExportDirectoryNotFoundError


def resolve_export_dir(directory: Optional[Union[Path, str]] = None) -> Path:
    """
    Resolve the directory holding deployment export files.

    Args:
        directory: Export directory (defaults to $HARDHAT_DEPLOY_EXPORT_DIR)

    Returns:
        Absolute path to an existing directory

    Raises:
        ConfigurationError: If no directory is passed or configured
        ExportDirectoryNotFoundError: If the path is not an existing directory
    """
    if directory is None or directory == "":
        directory = os.environ.get(EXPORT_DIR_ENV)

    if not directory:
        raise ConfigurationError(
            "Export directory required: pass `directory` or set "
            f"${EXPORT_DIR_ENV} environment variable"
        )

    export_dir = Path(directory).absolute()
    if not export_dir.is_dir():
        raise ExportDirectoryNotFoundError(
            f"Deployment export directory not found at {export_dir}"
        )

    return export_dir


def list_export_files(export_dir: Path) -> List[Path]:
    """
    List candidate export files in a directory.

    Entries are returned sorted by file name so that repeated runs fold
    files in the same order. Subdirectories are skipped.

    Args:
        export_dir: Directory to scan

    Returns:
        List of file paths
    """
    return [entry for entry in sorted(export_dir.iterdir()) if entry.is_file()]
