"""Protocol tokens that route dependency patterns to exotic resolution strategies.

A pattern such as ``github:user/repo`` is owned by the strategy registered for
the ``github`` token. The known tokens form a closed enumeration; the registry
built from them is assembled once at import time and is read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

PROTOCOL_SEPARATOR: Final[str] = ":"


class DispatchAmbiguityError(ValueError):
    """Raised when a registry would be unable to dispatch deterministically."""


class DuplicateTokenError(DispatchAmbiguityError):
    """Raised when a protocol token is registered twice."""


class InvalidTokenError(DispatchAmbiguityError):
    """Raised for empty tokens or tokens containing the protocol separator."""


class ExoticProtocol(StrEnum):
    """Protocols handled by exotic (non-registry) resolvers."""

    GIT = "git"
    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"
    GIST = "gist"
    FILE = "file"
    LINK = "link"

    @property
    def strategy_id(self) -> str:
        return _STRATEGY_IDS[self]


_STRATEGY_IDS: Final[dict[ExoticProtocol, str]] = {
    ExoticProtocol.GIT: "git",
    ExoticProtocol.GITHUB: "hosted-git:github",
    ExoticProtocol.GITLAB: "hosted-git:gitlab",
    ExoticProtocol.BITBUCKET: "hosted-git:bitbucket",
    ExoticProtocol.GIST: "gist",
    ExoticProtocol.FILE: "file",
    ExoticProtocol.LINK: "link",
}


@dataclass(frozen=True, slots=True)
class ProtocolDescriptor:
    """Binds a protocol token to the id of the strategy that resolves it."""

    token: str
    strategy_id: str

    @property
    def matcher(self) -> str:
        return f"{self.token}{PROTOCOL_SEPARATOR}"

    @classmethod
    def for_protocol(cls, protocol: ExoticProtocol) -> ProtocolDescriptor:
        return cls(token=protocol.value, strategy_id=protocol.strategy_id)


class ProtocolRegistry:
    """Ordered table of protocol descriptors with literal prefix lookup.

    Registration rejects empty tokens, duplicates, and tokens containing the
    separator. Two distinct separator-free tokens never yield matchers where
    one ``"<token>:"`` prefixes the other, so at most one descriptor matches
    a given pattern and lookup order never changes the outcome.
    """

    __slots__ = ("_descriptors", "_frozen")

    def __init__(self, descriptors: Iterable[ProtocolDescriptor] = ()) -> None:
        self._descriptors: list[ProtocolDescriptor] = []
        self._frozen = False
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: ProtocolDescriptor) -> None:
        if self._frozen:
            raise RuntimeError("Protocol registry is frozen; register protocols at startup")
        token = descriptor.token
        if not token or not token.strip():
            raise InvalidTokenError("Protocol token must not be empty")
        if PROTOCOL_SEPARATOR in token:
            raise InvalidTokenError(f"Protocol token {token!r} must not contain {PROTOCOL_SEPARATOR!r}")

        for existing in self._descriptors:
            if existing.token == token:
                raise DuplicateTokenError(f"Protocol token {token!r} is already registered")

        self._descriptors.append(descriptor)

    def freeze(self) -> ProtocolRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, pattern: str) -> ProtocolDescriptor | None:
        """Return the descriptor whose ``"<token>:"`` prefixes ``pattern``, if any."""

        for descriptor in self._descriptors:
            if pattern.startswith(descriptor.matcher):
                return descriptor
        return None

    def __iter__(self) -> Iterator[ProtocolDescriptor]:
        return iter(tuple(self._descriptors))

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, token: object) -> bool:
        return any(descriptor.token == token for descriptor in self._descriptors)


def build_default_registry() -> ProtocolRegistry:
    """Return a frozen registry holding every :class:`ExoticProtocol`."""

    return ProtocolRegistry(
        ProtocolDescriptor.for_protocol(protocol) for protocol in ExoticProtocol
    ).freeze()


DEFAULT_REGISTRY: Final[ProtocolRegistry] = build_default_registry()


__all__ = [
    "DEFAULT_REGISTRY",
    "PROTOCOL_SEPARATOR",
    "DispatchAmbiguityError",
    "DuplicateTokenError",
    "ExoticProtocol",
    "InvalidTokenError",
    "ProtocolDescriptor",
    "ProtocolRegistry",
    "build_default_registry",
]
