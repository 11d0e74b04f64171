"""Route raw dependency patterns to the exotic strategy that claims them.

Classification is total: any string yields either :class:`Claimed` or
:data:`UNCLAIMED`. An unclaimed pattern belongs to the default registry/semver
resolver. The fragment after ``"<token>:"`` is handed over untouched; checking
it is the claiming strategy's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Literal, TypeAlias

from .patterns import normalize_pattern
from .protocols import DEFAULT_REGISTRY

if TYPE_CHECKING:
    from .protocols import ProtocolRegistry


@dataclass(frozen=True, slots=True)
class Claimed:
    token: str
    strategy_id: str
    fragment: str
    claimed: Literal[True] = True


@dataclass(frozen=True, slots=True)
class Unclaimed:
    claimed: Literal[False] = False


UNCLAIMED: Final[Unclaimed] = Unclaimed()

ResolvedClaim: TypeAlias = Claimed | Unclaimed


class ExoticPatternDispatcher:
    """Classify dependency patterns against a protocol registry."""

    __slots__ = ("_registry",)

    def __init__(self, registry: ProtocolRegistry = DEFAULT_REGISTRY) -> None:
        self._registry = registry

    @property
    def registry(self) -> ProtocolRegistry:
        return self._registry

    def classify(self, pattern: str) -> ResolvedClaim:
        descriptor = self._registry.lookup(pattern)
        if descriptor is None:
            return UNCLAIMED
        return Claimed(
            token=descriptor.token,
            strategy_id=descriptor.strategy_id,
            fragment=pattern[len(descriptor.matcher) :],
        )

    def classify_dependency(self, pattern: str) -> ResolvedClaim:
        """Classify a ``name@range`` pattern, falling back to its range part."""

        claim = self.classify(pattern)
        if claim.claimed:
            return claim
        normalized = normalize_pattern(pattern)
        if not normalized.has_version:
            return UNCLAIMED
        return self.classify(normalized.range)


__all__ = ["UNCLAIMED", "Claimed", "ExoticPatternDispatcher", "ResolvedClaim", "Unclaimed"]
