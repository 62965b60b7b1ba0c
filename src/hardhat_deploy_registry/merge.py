"""Cross-chain contract merging for hardhat-deploy-registry library."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .selection import NameSelector
from .types import (
    Abi,
    Address,
    AddressField,
    AggregateContract,
    ChainId,
    ContractName,
    DeploymentExport,
    HardhatDeployOptions,
)

logger = logging.getLogger(__name__)


@dataclass
class PendingContract:
    """A contract being accumulated across chains, before simplification."""

    name: ContractName
    abi: Abi
    addresses: Dict[ChainId, Address] = field(default_factory=dict)


def contract_key(name: ContractName, options: HardhatDeployOptions) -> ContractName:
    """Apply the configured prefix and suffix to a raw contract name."""
    return f"{options.name_prefix}{name}{options.name_suffix}"


def fold_export(
    pending: Dict[ContractName, PendingContract],
    export: DeploymentExport,
    options: HardhatDeployOptions,
    selector: Optional[NameSelector] = None,
) -> None:
    """
    Fold one deployment export into the accumulated contracts.

    The first record seen for a key fixes its ABI. A later address for the
    same key and chain id replaces the earlier one.

    Args:
        pending: Accumulator keyed by output name (updated in place)
        export: Parsed deployment export for a single chain
        options: Registry options (name filters, prefix, suffix)
        selector: Compiled name filter (built from options if omitted)
    """
    if selector is None:
        selector = NameSelector.from_options(options)

    for name, record in export.contracts.items():
        if not selector(name):
            logger.debug("Skipping contract %s on chain %d", name, export.chain_id)
            continue

        key = contract_key(name, options)

        contract = pending.get(key)
        if contract is None:
            contract = PendingContract(name=key, abi=record.abi)
            pending[key] = contract

        previous = contract.addresses.get(export.chain_id)
        if previous is not None and previous != record.address:
            logger.debug(
                "Overwriting %s address on chain %d: %s -> %s",
                key,
                export.chain_id,
                previous,
                record.address,
            )

        contract.addresses[export.chain_id] = record.address


def fold_exports(
    exports: Iterable[DeploymentExport], options: HardhatDeployOptions
) -> Dict[ContractName, PendingContract]:
    """
    Fold deployment exports, in order, into contracts keyed by output name.

    Returns:
        Mapping in first-insertion order of output names

    Raises:
        ConfigurationError: If a name pattern is invalid (before any export
            is consumed)
    """
    selector = NameSelector.from_options(options)
    pending: Dict[ContractName, PendingContract] = {}
    for export in exports:
        fold_export(pending, export, options, selector)
    return pending


def simplify_address(addresses: Dict[ChainId, Address]) -> AddressField:
    """
    Collapse a chain -> address mapping when every chain shares one address.

    Args:
        addresses: Address per chain id

    Returns:
        The single address if there is exactly one distinct value,
        otherwise a copy of the mapping
    """
    unique = set(addresses.values())
    if len(unique) == 1:
        return unique.pop()
    return dict(addresses)


def finalize(contract: PendingContract) -> AggregateContract:
    """Turn an accumulated contract into its output form."""
    return AggregateContract(
        name=contract.name,
        abi=contract.abi,
        address=simplify_address(contract.addresses),
    )


def merge_exports(
    exports: Iterable[DeploymentExport], options: HardhatDeployOptions
) -> List[AggregateContract]:
    """
    Merge deployment exports into one contract list.

    Address simplification runs once per contract, after every export has
    been folded.

    Args:
        exports: Parsed deployment exports, in folding order
        options: Registry options

    Returns:
        Aggregate contracts in first-seen order
    """
    pending = fold_exports(exports, options)
    return [finalize(contract) for contract in pending.values()]
