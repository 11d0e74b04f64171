"""Exotic dependency pattern dispatch."""

from __future__ import annotations

from .dispatch import UNCLAIMED, Claimed, ExoticPatternDispatcher, ResolvedClaim, Unclaimed
from .patterns import NormalizedPattern, normalize_pattern
from .protocols import (
    DEFAULT_REGISTRY,
    DispatchAmbiguityError,
    DuplicateTokenError,
    ExoticProtocol,
    InvalidTokenError,
    ProtocolDescriptor,
    ProtocolRegistry,
    build_default_registry,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "UNCLAIMED",
    "Claimed",
    "DispatchAmbiguityError",
    "DuplicateTokenError",
    "ExoticPatternDispatcher",
    "ExoticProtocol",
    "InvalidTokenError",
    "NormalizedPattern",
    "ProtocolDescriptor",
    "ProtocolRegistry",
    "ResolvedClaim",
    "Unclaimed",
    "build_default_registry",
    "normalize_pattern",
]
