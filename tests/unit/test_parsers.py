"""Unit tests for deployment export parsers."""

import json
from pathlib import Path

import pytest

from hardhat_deploy_registry.exceptions import DeploymentParseError
from hardhat_deploy_registry.parsers import parse_chain_id, parse_deployment_export


class TestParseChainId:
    """Test the parse_chain_id function."""

    def test_decimal_string(self):
        """Test parsing the usual decimal-string chain id."""
        assert parse_chain_id("137") == 137

    def test_integer_passes_through(self):
        """Test that an integer chain id is accepted as-is."""
        assert parse_chain_id(11155111) == 11155111

    @pytest.mark.parametrize(
        "value", ["abc", "0x89", "", "1.5", "1_37", " 137 ", "+137", "-1", "\u0661\u0663\u0667"]
    )
    def test_non_numeric_strings_raise(self, value):
        """Test that non-decimal strings are rejected."""
        with pytest.raises(ValueError):
            parse_chain_id(value)

    @pytest.mark.parametrize("value", [None, True, 1.0, ["1"]])
    def test_non_string_types_raise(self, value):
        """Test that other JSON types are rejected."""
        with pytest.raises(ValueError):
            parse_chain_id(value)


class TestParseDeploymentExport:
    """Test the parse_deployment_export function."""

    def test_parses_sample_export(self, fixtures_dir: Path):
        """Test parsing a complete export file."""
        export = parse_deployment_export(fixtures_dir / "exports" / "polygon.json")

        assert export.chain_id == 137
        assert export.name == "polygon"
        assert list(export.contracts) == ["Token", "StakeRegistry", "Bridge"]

        bridge = export.contracts["Bridge"]
        assert bridge.address == "0x4444444444444444444444444444444444444444"
        assert bridge.abi[0]["name"] == "relay"
        assert bridge.linked_data == {"rootChainId": 1}

    def test_linked_data_defaults_to_none(self, fixtures_dir: Path):
        """Test that contracts without linkedData get None."""
        export = parse_deployment_export(fixtures_dir / "exports" / "mainnet.json")
        assert export.contracts["Token"].linked_data is None

    def test_missing_name_defaults_to_empty(self, tmp_path: Path):
        """Test that the network name is optional."""
        test_file = tmp_path / "local.json"
        test_file.write_text(json.dumps({"chainId": "31337", "contracts": {}}))

        export = parse_deployment_export(test_file)

        assert export.name == ""
        assert export.chain_id == 31337
        assert export.contracts == {}

    def test_extra_fields_are_ignored(self, tmp_path: Path):
        """Test that fields beyond those read do not matter."""
        test_file = tmp_path / "mainnet.json"
        data = {
            "chainId": "1",
            "contracts": {
                "Token": {"address": "0x01", "abi": [], "bytecode": "0x6080", "receipt": {}},
            },
            "extra": {"anything": True},
        }
        test_file.write_text(json.dumps(data))

        export = parse_deployment_export(test_file)
        assert export.contracts["Token"].address == "0x01"

    def test_invalid_json_raises_parse_error(self, tmp_path: Path):
        """Test that malformed JSON raises DeploymentParseError naming the file."""
        test_file = tmp_path / "broken.json"
        test_file.write_text("{ invalid json }")

        with pytest.raises(DeploymentParseError) as exc_info:
            parse_deployment_export(test_file)

        assert str(test_file) in str(exc_info.value)
        assert exc_info.value.path == test_file
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_non_numeric_chain_id_raises_parse_error(self, tmp_path: Path):
        """Test that a non-numeric chainId fails the parse."""
        test_file = tmp_path / "mainnet.json"
        test_file.write_text(json.dumps({"chainId": "mainnet", "contracts": {}}))

        with pytest.raises(DeploymentParseError) as exc_info:
            parse_deployment_export(test_file)

        assert "chainId" in str(exc_info.value)

    def test_underscored_chain_id_raises_parse_error(self, tmp_path: Path):
        """Test that Python digit grouping is not accepted in chainId."""
        test_file = tmp_path / "polygon.json"
        test_file.write_text(json.dumps({"chainId": "1_37", "contracts": {}}))

        with pytest.raises(DeploymentParseError) as exc_info:
            parse_deployment_export(test_file)

        assert "1_37" in str(exc_info.value)

    def test_missing_chain_id_raises_parse_error(self, tmp_path: Path):
        """Test that chainId is required."""
        test_file = tmp_path / "mainnet.json"
        test_file.write_text(json.dumps({"contracts": {}}))

        with pytest.raises(DeploymentParseError):
            parse_deployment_export(test_file)

    def test_missing_contracts_raises_parse_error(self, tmp_path: Path):
        """Test that the contracts mapping is required."""
        test_file = tmp_path / "mainnet.json"
        test_file.write_text(json.dumps({"chainId": "1"}))

        with pytest.raises(DeploymentParseError) as exc_info:
            parse_deployment_export(test_file)

        assert "contracts" in str(exc_info.value)

    def test_contract_missing_address_raises_parse_error(self, tmp_path: Path):
        """Test that a contract without address fails the parse."""
        test_file = tmp_path / "mainnet.json"
        test_file.write_text(json.dumps({"chainId": "1", "contracts": {"Token": {"abi": []}}}))

        with pytest.raises(DeploymentParseError) as exc_info:
            parse_deployment_export(test_file)

        assert "Token" in str(exc_info.value)

    def test_top_level_array_raises_parse_error(self, tmp_path: Path):
        """Test that a non-object document fails the parse."""
        test_file = tmp_path / "mainnet.json"
        test_file.write_text("[]")

        with pytest.raises(DeploymentParseError):
            parse_deployment_export(test_file)

    def test_parse_error_is_value_error(self, tmp_path: Path):
        """Test that DeploymentParseError can be caught as ValueError."""
        test_file = tmp_path / "broken.json"
        test_file.write_text("not json")

        with pytest.raises(ValueError):
            parse_deployment_export(test_file)

    def test_missing_file_raises_os_error(self, tmp_path: Path):
        """Test that I/O errors propagate unchanged."""
        with pytest.raises(FileNotFoundError):
            parse_deployment_export(tmp_path / "missing.json")
