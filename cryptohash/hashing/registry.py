"""
Hash algorithm registry.

The registry is built once from a set of strategies plus an alias table and
is read-only afterwards. ALGORITHMS is the process-wide instance used by
perform_cryptohash().
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from ..core.exceptions import UnknownAlgorithmError
from .algorithms import ALIASES, Algorithm
from .strategies import DEFAULT_STRATEGIES, HashStrategy


class AlgorithmRegistry(Mapping):
    """
    Immutable mapping from Algorithm to the strategy that computes it.

    Keys may be given as Algorithm members or as names; names are matched
    ignoring case and surrounding whitespace. Iteration follows Algorithm
    declaration order.

    Example:
        registry = AlgorithmRegistry(DEFAULT_STRATEGIES, ALIASES)
        registry["SHA1"](b"abc")
        registry.compute("crc32", b"abc")
    """

    __slots__ = ("_aliases", "_table")

    def __init__(
        self,
        strategies: Iterable[HashStrategy],
        aliases: Mapping[Algorithm, Algorithm] | None = None,
    ):
        """
        Build the registry.

        Args:
            strategies: One strategy per canonical algorithm
            aliases: Alias -> canonical algorithm; the alias gets the
                canonical algorithm's strategy

        Raises:
            ValueError: If two strategies claim the same algorithm, or an
                alias points at an algorithm with no strategy
        """
        aliases = dict(aliases or {})
        by_algorithm: dict[Algorithm, HashStrategy] = {}
        for strategy in strategies:
            if strategy.algorithm in by_algorithm:
                raise ValueError(f"Duplicate strategy for algorithm: {strategy.algorithm}")
            by_algorithm[strategy.algorithm] = strategy

        for alias, target in aliases.items():
            if target not in by_algorithm:
                raise ValueError(f"Alias {alias} points at unregistered algorithm: {target}")
            if alias in by_algorithm:
                raise ValueError(f"Alias {alias} shadows a registered algorithm")

        table: dict[Algorithm, HashStrategy] = {}
        for algorithm in Algorithm:
            canonical = aliases.get(algorithm, algorithm)
            if canonical in by_algorithm:
                table[algorithm] = by_algorithm[canonical]

        self._table: Mapping[Algorithm, HashStrategy] = MappingProxyType(table)
        self._aliases: Mapping[Algorithm, Algorithm] = MappingProxyType(aliases)

    def __getitem__(self, algorithm: Any) -> HashStrategy:
        """
        Look up the strategy for an Algorithm or name.

        Raises:
            UnknownAlgorithmError: If the name is unknown or not registered here
        """
        key = Algorithm.parse(algorithm)
        try:
            return self._table[key]
        except KeyError:
            raise UnknownAlgorithmError(algorithm, available=self.available_algorithms) from None

    def get(self, algorithm: Any, default: Any = None) -> Any:
        """Get the strategy for an algorithm, or default if there is none."""
        try:
            return self[algorithm]
        except UnknownAlgorithmError:
            return default

    def __contains__(self, algorithm: object) -> bool:
        return self.get(algorithm) is not None

    def __iter__(self) -> Iterator[Algorithm]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self.available_algorithms)})"

    def compute(self, algorithm: Any, data: Any) -> Any:
        """
        Compute the digest of data using the named algorithm.

        Args:
            algorithm: Algorithm member or name
            data: Input to hash

        Returns:
            Uppercase hex string, int for checksums, or the input itself for 'none'
        """
        return self[algorithm](data)

    @property
    def available_algorithms(self) -> list[str]:
        """List available algorithm names, aliases included."""
        return [algorithm.value for algorithm in self._table]

    @property
    def aliases(self) -> Mapping[Algorithm, Algorithm]:
        """Read-only alias -> canonical algorithm table."""
        return self._aliases


ALGORITHMS = AlgorithmRegistry(DEFAULT_STRATEGIES, ALIASES)
