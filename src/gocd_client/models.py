"""Pydantic models for the GoCD resources exposed by :class:`GoCDClient`."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class GoCDModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Link(GoCDModel):
    href: str = ""


class Links(GoCDModel):
    self_: Link | None = Field(None, alias="self")
    doc: Link | None = None
    find: Link | None = None


class Version(GoCDModel):
    links: Links | None = Field(None, alias="_links", exclude=True)
    version: str = ""
    build_number: str = ""
    git_sha: str = ""
    full_version: str = ""
    commit_url: str = ""


class CurrentUser(GoCDModel):
    links: Links | None = Field(None, alias="_links", exclude=True)
    login_name: str = ""
    display_name: str = ""
    enabled: bool = False
    email: str | None = None
    email_me: bool = False
    checkin_aliases: list[Any] = Field(default_factory=list)


class Property(GoCDModel):
    key: str
    value: str | None = None
    encrypted_value: str | None = None

    @model_serializer(mode="wrap")
    def _omit_unset_values(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


class PackageRepo(GoCDModel):
    id: str
    name: str = ""


class Package(GoCDModel):
    links: Links | None = Field(None, alias="_links", exclude=True)
    id: str
    name: str
    auto_update: bool = True
    package_repo: PackageRepo
    configuration: list[Property] = Field(default_factory=list)


class EmbeddedPackages(GoCDModel):
    packages: list[Package] = Field(default_factory=list)


class AllPackages(GoCDModel):
    links: Links | None = Field(None, alias="_links", exclude=True)
    embedded: EmbeddedPackages = Field(default_factory=EmbeddedPackages, alias="_embedded")

    @property
    def packages(self) -> list[Package]:
        return self.embedded.packages


__all__ = [
    "AllPackages",
    "CurrentUser",
    "EmbeddedPackages",
    "GoCDModel",
    "Link",
    "Links",
    "Package",
    "PackageRepo",
    "Property",
    "Version",
]
