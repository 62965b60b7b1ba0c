"""
hardhat-deploy-registry: merge hardhat-deploy export files into a chain-indexed contract registry
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ConfigurationError,
    DeploymentParseError,
    ExportDirectoryNotFoundError,
    RegistryError,
)
from .registry import HardhatDeployPlugin, build_registry, hardhat_deploy, registry_to_json
from .selection import NameSelector, should_include, should_include_file
from .types import AggregateContract, ContractExport, DeploymentExport, HardhatDeployOptions

try:
    __version__ = version("hardhat-deploy-registry")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "HardhatDeployPlugin",
    "hardhat_deploy",
    "build_registry",
    "registry_to_json",
    "NameSelector",
    "should_include",
    "should_include_file",
    "AggregateContract",
    "ContractExport",
    "DeploymentExport",
    "HardhatDeployOptions",
    "RegistryError",
    "ConfigurationError",
    "ExportDirectoryNotFoundError",
    "DeploymentParseError",
]
