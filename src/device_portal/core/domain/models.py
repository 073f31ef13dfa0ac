"""Response models for the device portal REST API (Pydantic v2).

The portal answers with PascalCase JSON. Each model maps those keys through
aliases, ignores unknown keys and gives every field a default, so a partial
body still validates and an absent body maps to `Model.empty()`.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict


class DeviceModel(BaseModel):
    """Base for every response DTO."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def empty(cls):
        """Instance with every field at its default."""

        return cls()

    @property
    def is_empty(self) -> bool:
        return self == type(self)()


class MachineName(DeviceModel):
    """`GET /api/os/machinename`."""

    name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("Name", "ComputerName", "name"),
        serialization_alias="Name",
        description="Network name of the device.",
    )


class SoftwareInfo(DeviceModel):
    """`GET /api/os/info`."""

    computer_name: str | None = Field(default=None, alias="ComputerName")
    language: str | None = Field(default=None, alias="Language")
    os_edition: str | None = Field(default=None, alias="OsEdition")
    os_edition_id: int | None = Field(default=None, alias="OsEditionId")
    os_version: str | None = Field(default=None, alias="OsVersion")
    platform: str | None = Field(default=None, alias="Platform")


class IpAddress(DeviceModel):
    ip_address: str | None = Field(default=None, alias="IpAddress")
    mask: str | None = Field(default=None, alias="Mask")


class DhcpInfo(DeviceModel):
    address: IpAddress | None = Field(default=None, alias="Address")
    lease_expires: int | None = Field(
        default=None,
        alias="LeaseExpires",
        description="Lease expiry as a Unix timestamp.",
    )
    lease_obtained: int | None = Field(
        default=None,
        alias="LeaseObtained",
        description="Lease start as a Unix timestamp.",
    )


class NetworkAdapter(DeviceModel):
    description: str | None = Field(default=None, alias="Description")
    hardware_address: str | None = Field(default=None, alias="HardwareAddress")
    index: int | None = Field(default=None, alias="Index")
    name: str | None = Field(default=None, alias="Name")
    type: str | None = Field(default=None, alias="Type")
    dhcp: DhcpInfo | None = Field(default=None, alias="DHCP")
    gateways: list[IpAddress] = Field(default_factory=list, alias="Gateways")
    ip_addresses: list[IpAddress] = Field(default_factory=list, alias="IpAddresses")


class IpConfig(DeviceModel):
    """`GET /api/networking/ipconfig`."""

    adapters: list[NetworkAdapter] = Field(default_factory=list, alias="Adapters")


class PackageVersion(DeviceModel):
    major: int = Field(default=0, alias="Major")
    minor: int = Field(default=0, alias="Minor")
    build: int = Field(default=0, alias="Build")
    revision: int = Field(default=0, alias="Revision")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"


class AppXPackage(DeviceModel):
    name: str | None = Field(default=None, alias="Name")
    package_family_name: str | None = Field(default=None, alias="PackageFamilyName")
    package_full_name: str | None = Field(default=None, alias="PackageFullName")
    package_origin: int | None = Field(default=None, alias="PackageOrigin")
    package_relative_id: str | None = Field(default=None, alias="PackageRelativeId")
    publisher: str | None = Field(default=None, alias="Publisher")
    version: PackageVersion | None = Field(default=None, alias="Version")
    can_uninstall: bool | None = Field(default=None, alias="CanUninstall")


class AppXPackages(DeviceModel):
    """`GET /api/appx/packagemanager/packages`."""

    installed_packages: list[AppXPackage] = Field(
        default_factory=list,
        alias="InstalledPackages",
    )

    def find(self, name: str) -> AppXPackage | None:
        """First package whose name or family name matches `name` (case-insensitive)."""

        needle = name.casefold()
        for package in self.installed_packages:
            candidates = (package.name, package.package_family_name)
            if any(c and c.casefold() == needle for c in candidates):
                return package
        return None


class DeviceOverview(BaseModel):
    """All four read endpoints fetched together."""

    machine_name: MachineName = Field(default_factory=MachineName)
    software_info: SoftwareInfo = Field(default_factory=SoftwareInfo)
    ip_config: IpConfig = Field(default_factory=IpConfig)
    installed_packages: AppXPackages = Field(default_factory=AppXPackages)
