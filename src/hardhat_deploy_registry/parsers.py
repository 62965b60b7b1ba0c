"""Deployment export parsers for hardhat-deploy-registry library."""

import json
import re
from pathlib import Path
from typing import Any, Dict

from .exceptions import DeploymentParseError
from .types import ContractExport, DeploymentExport


def parse_chain_id(value: Any) -> int:
    """
    Parse a chain id from its decimal-string form.

    Args:
        value: Raw `chainId` value, e.g. "137"

    Returns:
        Chain id as integer

    Raises:
        ValueError: If the value is not a decimal integer
    """
    # bool is an int subclass; true/false is never a chain id
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(f"chainId must be a decimal string, got {value!r}")

    # ASCII digits only; int() also takes signs, underscores, spaces and non-ASCII digits
    if isinstance(value, str) and not re.fullmatch(r"[0-9]+", value):
        raise ValueError(f"chainId must be a decimal string, got {value!r}")

    return int(value)


def parse_contract_export(data: Dict[str, Any]) -> ContractExport:
    """
    Build a ContractExport from one entry of an export's `contracts` mapping.

    Only `address`, `abi` and the optional `linkedData` are read.

    Raises:
        KeyError: If address or abi is missing
    """
    return ContractExport(
        address=data["address"],
        abi=data["abi"],
        linked_data=data.get("linkedData"),
    )


def parse_deployment_export(file_path: Path) -> DeploymentExport:
    """
    Parse a `hardhat-deploy --export` JSON file.

    Args:
        file_path: Path to the export file (one per network)

    Returns:
        DeploymentExport with contracts in document order

    Raises:
        DeploymentParseError: If the file is not valid JSON, the chain id is
            not numeric, or a required field is missing
        OSError: If the file cannot be read
    """
    with open(file_path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DeploymentParseError(file_path, f"malformed JSON ({e})") from e

    if not isinstance(data, dict):
        raise DeploymentParseError(file_path, "top-level value is not an object")

    if "chainId" not in data:
        raise DeploymentParseError(file_path, "missing chainId")
    try:
        chain_id = parse_chain_id(data["chainId"])
    except ValueError as e:
        raise DeploymentParseError(
            file_path, f"chainId {data['chainId']!r} is not a decimal integer"
        ) from e

    raw_contracts = data.get("contracts")
    if not isinstance(raw_contracts, dict):
        raise DeploymentParseError(file_path, "missing contracts mapping")

    contracts: Dict[str, ContractExport] = {}
    for name, contract_data in raw_contracts.items():
        try:
            contracts[name] = parse_contract_export(contract_data)
        except (KeyError, TypeError) as e:
            raise DeploymentParseError(
                file_path, f"contract '{name}' is missing address or abi"
            ) from e

    return DeploymentExport(
        chain_id=chain_id,
        name=data.get("name", ""),
        contracts=contracts,
    )
