"""Data types and dataclasses for hardhat-deploy-registry library."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Collection, Dict, List, Optional, Sequence, Union

ChainId = int
ContractName = str
Address = str
Abi = List[Dict[str, Any]]

# A contract-name predicate; patterns and strings are normalized into one
NameMatcher = Callable[[str], bool]
NameMatcherLike = Union[NameMatcher, re.Pattern, str]

# Either a single address shared by every chain, or one address per chain id
AddressField = Union[Address, Dict[ChainId, Address]]


@dataclass(frozen=True)
class ContractExport:
    """A single contract entry inside a deployment export."""

    address: Address  # Lowercase hex, chain-scoped
    abi: Abi
    linked_data: Optional[Any] = None


@dataclass(frozen=True)
class DeploymentExport:
    """Contents of one `hardhat-deploy --export` file (one per chain)."""

    chain_id: ChainId
    name: str  # Logical network name, e.g. "mainnet"
    contracts: Dict[ContractName, ContractExport]


@dataclass
class AggregateContract:
    """A contract merged across every chain it is deployed on."""

    name: ContractName  # Display name, prefix and suffix applied
    abi: Abi
    address: AddressField

    @property
    def is_uniform(self) -> bool:
        """True if the contract lives at the same address on every chain."""
        return isinstance(self.address, str)

    def to_dict(self) -> Dict[str, Any]:
        """
        Render as a JSON-compatible dictionary.

        Chain ids become string keys since JSON objects only have string keys.
        """
        if isinstance(self.address, dict):
            address: Any = {str(chain_id): addr for chain_id, addr in self.address.items()}
        else:
            address = self.address
        return {"name": self.name, "abi": self.abi, "address": address}


@dataclass
class HardhatDeployOptions:
    """Options recognized by the hardhat-deploy registry builder."""

    # Required
    directory: Optional[Union[Path, str]] = None

    # Contract name filters
    includes: Optional[Sequence[NameMatcherLike]] = None
    excludes: Optional[Sequence[NameMatcherLike]] = None

    # Network filters, matched against file names without extension
    include_networks: Optional[Collection[str]] = None
    exclude_networks: Optional[Collection[str]] = None

    # Output naming
    name_prefix: str = ""
    name_suffix: str = ""
