"""File and contract name selection for hardhat-deploy-registry library."""

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import List, Optional, Sequence, Union

from .constants import EXPORT_FILE_EXTENSION
from .exceptions import ConfigurationError
from .types import HardhatDeployOptions, NameMatcher, NameMatcherLike


def as_matcher(pattern: NameMatcherLike) -> NameMatcher:
    """
    Normalize a name pattern into a predicate.

    Args:
        pattern: Compiled regular expression, regular expression source
                 string, or a callable taking a name and returning bool

    Returns:
        Predicate over contract names. Regular expressions are matched
        anywhere in the name (`search`), not anchored.

    Raises:
        ConfigurationError: If a string is not a valid regular expression,
            or the pattern is of an unsupported type
    """
    if isinstance(pattern, re.Pattern):
        return lambda name: pattern.search(name) is not None

    if isinstance(pattern, str):
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(f"Invalid name pattern {pattern!r}: {e}") from e
        return lambda name: compiled.search(name) is not None

    if callable(pattern):
        return pattern

    raise ConfigurationError(f"Unsupported name pattern type: {type(pattern).__name__}")


def compile_matchers(patterns: Optional[Sequence[NameMatcherLike]]) -> List[NameMatcher]:
    """Normalize a sequence of name patterns, preserving order."""
    if not patterns:
        return []
    return [as_matcher(p) for p in patterns]


def network_name(file_name: Union[PurePath, str]) -> str:
    """
    Derive the network identifier from an export file name.

    Args:
        file_name: File name or path, e.g. "mainnet.json"

    Returns:
        Base name with a trailing ".json" removed, e.g. "mainnet". Other
        extensions are kept as part of the network id.
    """
    return PurePath(file_name).name.removesuffix(EXPORT_FILE_EXTENSION)


def should_include_file(file_name: Union[PurePath, str], options: HardhatDeployOptions) -> bool:
    """
    Decide whether an export file participates in the registry.

    Absent or empty network lists include every file.
    """
    network = network_name(file_name)

    if options.include_networks and network not in options.include_networks:
        return False

    if options.exclude_networks and network in options.exclude_networks:
        return False

    return True


@dataclass(frozen=True)
class NameSelector:
    """Contract name filter with its patterns compiled once."""

    includes: List[NameMatcher]
    excludes: List[NameMatcher]

    @classmethod
    def from_options(cls, options: HardhatDeployOptions) -> "NameSelector":
        """
        Compile the include and exclude patterns of the options.

        Raises:
            ConfigurationError: If a pattern is invalid
        """
        return cls(
            includes=compile_matchers(options.includes),
            excludes=compile_matchers(options.excludes),
        )

    def __call__(self, contract_name: str) -> bool:
        """
        Decide whether a contract participates in the registry.

        Excludes are checked first and always win. A non-empty includes list
        then requires at least one match; without includes everything passes.
        """
        for exclude in self.excludes:
            if exclude(contract_name):
                return False

        if self.includes:
            return any(include(contract_name) for include in self.includes)

        return True


def should_include(contract_name: str, options: HardhatDeployOptions) -> bool:
    """
    Decide whether a contract participates in the registry.

    Compiles the options' patterns on every call; use NameSelector to filter
    many names.

    Raises:
        ConfigurationError: If the options carry an invalid pattern
    """
    return NameSelector.from_options(options)(contract_name)
