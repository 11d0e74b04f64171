"""Pydantic models describing the ``package.json`` fields we read."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _unscoped(name: str) -> str:
    return name.rsplit("/", 1)[-1]


class ManifestBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PackageManifest(ManifestBaseModel):
    name: str
    version: str = "0.0.0"
    bin: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _expand_string_bin(cls, value: object) -> object:
        # "bin": "./cli.js" exposes the package's own (unscoped) name
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            bin_value = mapping_value.get("bin")
            name_value = mapping_value.get("name")
            if isinstance(bin_value, str) and isinstance(name_value, str):
                data: dict[str, object] = dict(mapping_value)
                data["bin"] = {_unscoped(name_value.strip()): bin_value}
                return data
            if bin_value is None and "bin" in mapping_value:
                data = dict(mapping_value)
                del data["bin"]
                return data
        return value

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Package name must not be blank")
        return stripped

    @property
    def bin_names(self) -> tuple[str, ...]:
        return tuple(sorted(self.bin))


__all__ = ["ManifestBaseModel", "PackageManifest"]
