from __future__ import annotations

from device_portal.core.domain.models import (
    AppXPackages,
    IpConfig,
    MachineName,
    PackageVersion,
    SoftwareInfo,
)

IPCONFIG_PAYLOAD = """
{
  "Adapters": [
    {
      "Description": "Microsoft Kernel Debug Network Adapter",
      "HardwareAddress": "b8-27-eb-00-11-22",
      "Index": 2,
      "Name": "{C8B4F1A2-0000-0000-0000-000000000000}",
      "Type": "Ethernet",
      "DHCP": {
        "Address": {"IpAddress": "192.168.1.1", "Mask": "255.255.255.255"},
        "LeaseExpires": 1700003600,
        "LeaseObtained": 1700000000
      },
      "Gateways": [{"IpAddress": "192.168.1.1", "Mask": "255.255.255.255"}],
      "IpAddresses": [{"IpAddress": "192.168.1.50", "Mask": "255.255.255.0"}],
      "WINS": {"Primary": {"IpAddress": "0.0.0.0"}}
    }
  ]
}
"""

PACKAGES_PAYLOAD = """
{
  "InstalledPackages": [
    {
      "CanUninstall": true,
      "Name": "IoTCoreDefaultApp",
      "PackageFamilyName": "IoTCoreDefaultApp_1w720vyc4ccym",
      "PackageFullName": "IoTCoreDefaultApp_1.0.0.0_arm__1w720vyc4ccym",
      "PackageOrigin": 2,
      "PackageRelativeId": "IoTCoreDefaultApp_1w720vyc4ccym!App",
      "Publisher": "CN=Microsoft Corporation",
      "Version": {"Build": 0, "Major": 1, "Minor": 0, "Revision": 0},
      "RegisteredUsers": []
    },
    {"Name": "ZWaveAdapterHeadlessApp", "PackageFamilyName": "ZWave_1w720vyc4ccym"}
  ]
}
"""


def test_machine_name_accepts_both_key_spellings():
    assert MachineName.model_validate_json('{"Name": "DeviceX"}').name == "DeviceX"
    assert MachineName.model_validate_json('{"ComputerName": "minwinpc"}').name == "minwinpc"
    assert MachineName(name="direct").name == "direct"


def test_unknown_fields_are_ignored_and_missing_default():
    info = SoftwareInfo.model_validate_json('{"OsEdition": "IoTUAP", "Surprise": [1, 2]}')

    assert info.os_edition == "IoTUAP"
    assert info.os_version is None
    assert not info.is_empty


def test_empty_instances():
    assert IpConfig.empty().adapters == []
    assert AppXPackages.empty().is_empty
    assert MachineName.model_validate_json("{}").is_empty


def test_ip_config_nested_payload():
    config = IpConfig.model_validate_json(IPCONFIG_PAYLOAD)

    adapter = config.adapters[0]
    assert adapter.type == "Ethernet"
    assert adapter.index == 2
    assert adapter.dhcp is not None
    assert adapter.dhcp.address.ip_address == "192.168.1.1"
    assert adapter.dhcp.lease_expires == 1700003600
    assert [a.ip_address for a in adapter.ip_addresses] == ["192.168.1.50"]
    assert adapter.gateways[0].mask == "255.255.255.255"


def test_packages_payload_and_lookup():
    packages = AppXPackages.model_validate_json(PACKAGES_PAYLOAD)

    assert len(packages.installed_packages) == 2
    default_app = packages.find("iotcoredefaultapp")
    assert default_app is not None
    assert default_app.can_uninstall is True
    assert str(default_app.version) == "1.0.0.0"
    assert packages.find("ZWave_1w720vyc4ccym").name == "ZWaveAdapterHeadlessApp"
    assert packages.find("missing") is None


def test_package_version_defaults():
    assert str(PackageVersion()) == "0.0.0.0"


def test_dump_uses_device_keys():
    dumped = SoftwareInfo(computer_name="minwinpc").model_dump(by_alias=True, exclude_none=True)

    assert dumped == {"ComputerName": "minwinpc"}
