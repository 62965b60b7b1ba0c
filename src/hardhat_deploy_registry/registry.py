"""Main API for hardhat-deploy-registry library."""

import json
import logging
from pathlib import Path
from typing import Any, Iterator, List, Optional, Union

from .constants import PLUGIN_NAME
from .merge import merge_exports
from .parsers import parse_deployment_export
from .paths import list_export_files, resolve_export_dir
from .selection import should_include_file
from .types import AggregateContract, DeploymentExport, HardhatDeployOptions

logger = logging.getLogger(__name__)


def iter_exports(export_dir: Path, options: HardhatDeployOptions) -> Iterator[DeploymentExport]:
    """
    Yield parsed exports for every selected file in the directory.

    Files are visited in file-name order; files rejected by the network
    filters are never opened.
    """
    for file_path in list_export_files(export_dir):
        if not should_include_file(file_path.name, options):
            logger.debug("Skipping export file %s (network filter)", file_path.name)
            continue

        export = parse_deployment_export(file_path)
        logger.debug(
            "Folding %s (chain %d, %d contracts)",
            file_path.name,
            export.chain_id,
            len(export.contracts),
        )
        yield export


def build_registry(options: HardhatDeployOptions) -> List[AggregateContract]:
    """
    Build the consolidated contract registry for an export directory.

    Args:
        options: Registry options; `directory` is required

    Returns:
        Aggregate contracts, in the order their names were first seen

    Raises:
        ConfigurationError: If no directory is configured or a name pattern
            is invalid
        ExportDirectoryNotFoundError: If the directory does not exist
        DeploymentParseError: If any selected file is malformed
    """
    export_dir = resolve_export_dir(options.directory)

    contracts = merge_exports(iter_exports(export_dir, options), options)
    logger.info("Built registry of %d contracts from %s", len(contracts), export_dir)
    return contracts


def registry_to_json(contracts: List[AggregateContract], indent: Optional[int] = 2) -> str:
    """Serialize a registry to a JSON string."""
    return json.dumps([contract.to_dict() for contract in contracts], indent=indent)


class HardhatDeployPlugin:
    """Code-generation plugin exposing hardhat-deploy exports as contracts."""

    name = PLUGIN_NAME

    def __init__(self, options: HardhatDeployOptions):
        """
        Initialize the plugin.

        Args:
            options: Registry options. The directory is resolved when
                     contracts() is called, not here.
        """
        self.options = options

    def contracts(self) -> List[AggregateContract]:
        """Build a fresh registry from the current directory contents."""
        return build_registry(self.options)


def hardhat_deploy(
    directory: Optional[Union[Path, str]] = None, **kwargs: Any
) -> HardhatDeployPlugin:
    """
    Create a hardhat-deploy plugin.

    Args:
        directory: Export directory (defaults to $HARDHAT_DEPLOY_EXPORT_DIR)
        **kwargs: Any other HardhatDeployOptions field, e.g. includes,
                  exclude_networks, name_prefix

    Returns:
        HardhatDeployPlugin
    """
    return HardhatDeployPlugin(HardhatDeployOptions(directory=directory, **kwargs))
