"""Custom exception classes for hardhat-deploy-registry library."""

from pathlib import Path
from typing import Union


class RegistryError(Exception):
    """Base exception for registry-building errors."""

    pass


class ConfigurationError(RegistryError, ValueError):
    """Raised when plugin options are missing or invalid."""

    pass


class ExportDirectoryNotFoundError(RegistryError, FileNotFoundError):
    """Raised when the configured export directory does not exist."""

    pass


class DeploymentParseError(RegistryError, ValueError):
    """Raised when a deployment export file cannot be parsed."""

    def __init__(self, path: Union[Path, str], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid deployment export {self.path}: {reason}")
