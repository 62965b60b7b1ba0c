"""Shared pytest fixtures for hardhat-deploy-registry tests."""

import json
import shutil
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

from hardhat_deploy_registry.constants import EXPORT_DIR_ENV


@pytest.fixture(autouse=True)
def clear_export_dir_env(monkeypatch):
    """Keep a developer's $HARDHAT_DEPLOY_EXPORT_DIR out of the tests."""
    monkeypatch.delenv(EXPORT_DIR_ENV, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def exports_dir(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy the sample exports (mainnet, polygon, sepolia) to a temp directory."""
    target = tmp_path / "exports"
    shutil.copytree(fixtures_dir / "exports", target)
    return target


@pytest.fixture
def write_export(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes an export file into tmp_path/deployments."""
    export_dir = tmp_path / "deployments"
    export_dir.mkdir(parents=True, exist_ok=True)

    def _write(
        network: str,
        chain_id: Any,
        contracts: Dict[str, Dict[str, Any]],
        name: Optional[str] = None,
    ) -> Path:
        file_path = export_dir / f"{network}.json"
        data = {
            "name": name if name is not None else network,
            "chainId": chain_id,
            "contracts": contracts,
        }
        with open(file_path, "w") as f:
            json.dump(data, f, indent=2)
        return file_path

    return _write

