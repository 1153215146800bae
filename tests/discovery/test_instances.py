"""
Tests for msbuildlocator.discovery.instances module.
"""

import dataclasses
from pathlib import Path

import pytest

from msbuildlocator.core.version import Version
from msbuildlocator.discovery.instances import (
    DiscoveryType,
    DotNetSdkInstance,
    QueryOptions,
    VisualStudioInstance,
)


class TestDiscoveryType:
    """Tests for DiscoveryType flags."""

    def test_all_contains_every_origin(self):
        for flag in (
            DiscoveryType.DEVELOPER_CONSOLE,
            DiscoveryType.VISUAL_STUDIO_SETUP,
            DiscoveryType.DOTNET_SDK,
        ):
            assert flag in DiscoveryType.ALL

    def test_other_is_sdk(self):
        assert DiscoveryType.OTHER is DiscoveryType.DOTNET_SDK

    def test_labels(self):
        assert DiscoveryType.DEVELOPER_CONSOLE.label == "developer-console"
        assert DiscoveryType.VISUAL_STUDIO_SETUP.label == "visual-studio-setup"
        assert DiscoveryType.DOTNET_SDK.label == "dotnet-sdk"

    def test_from_label(self):
        assert DiscoveryType.from_label("setup") is DiscoveryType.VISUAL_STUDIO_SETUP
        assert DiscoveryType.from_label("SDK") is DiscoveryType.DOTNET_SDK
        assert DiscoveryType.from_label("other") is DiscoveryType.DOTNET_SDK
        assert (
            DiscoveryType.from_label("developer-console")
            is DiscoveryType.DEVELOPER_CONSOLE
        )

    def test_from_label_unknown(self):
        with pytest.raises(ValueError, match="Unknown discovery type"):
            DiscoveryType.from_label("registry")


class TestVisualStudioInstance:
    """Tests for VisualStudioInstance."""

    def test_create_derives_msbuild_path(self):
        root = Path("/vs/2022")
        inst = VisualStudioInstance.create(
            "Visual Studio Enterprise 2022",
            root,
            Version.parse("17.4"),
            DiscoveryType.VISUAL_STUDIO_SETUP,
        )

        assert inst.visual_studio_root_path == root
        assert inst.msbuild_path == root / "MSBuild" / "15.0" / "Bin"
        assert inst.msbuild_path != inst.visual_studio_root_path

    def test_create_custom_subpath(self):
        inst = VisualStudioInstance.create(
            "VS",
            "/vs",
            None,
            DiscoveryType.DEVELOPER_CONSOLE,
            msbuild_subpath=("MSBuild", "Current", "Bin"),
        )

        assert inst.msbuild_path == Path("/vs/MSBuild/Current/Bin")
        assert inst.version is None

    def test_immutable(self):
        inst = VisualStudioInstance.create(
            "VS", "/vs", None, DiscoveryType.DEVELOPER_CONSOLE
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            inst.name = "other"

    def test_to_dict(self):
        inst = VisualStudioInstance.create(
            "DEVCONSOLE", "/vs", Version.parse("16.11"), DiscoveryType.DEVELOPER_CONSOLE
        )

        result = inst.to_dict()

        assert result["name"] == "DEVCONSOLE"
        assert result["version"] == "16.11"
        assert result["discovery_type"] == "developer-console"
        assert result["visual_studio_root_path"] == str(Path("/vs"))
        assert result["msbuild_path"] == str(Path("/vs/MSBuild/15.0/Bin"))

    def test_str_unknown_version(self):
        inst = VisualStudioInstance.create(
            "DEVCONSOLE", "/vs", None, DiscoveryType.DEVELOPER_CONSOLE
        )
        assert "unknown" in str(inst)
        assert "DEVCONSOLE" in str(inst)


class TestDotNetSdkInstance:
    """Tests for DotNetSdkInstance."""

    def test_create(self, tmp_path):
        inst = DotNetSdkInstance.create(Version.parse("6.0.100"), tmp_path / "6.0.100")

        assert inst.name == ".NET Core SDK"
        assert inst.msbuild_path == tmp_path / "6.0.100"
        assert inst.discovery_type is DiscoveryType.DOTNET_SDK
        assert str(inst.version) == "6.0.100"

    def test_path_is_converted(self):
        inst = DotNetSdkInstance.create(Version.parse("6.0.100"), "/sdk/6.0.100")
        assert isinstance(inst.msbuild_path, Path)

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            DotNetSdkInstance.create(Version.parse("6.0.100"), "")

    def test_equal_instances(self):
        a = DotNetSdkInstance.create(Version.parse("6.0.100"), "/sdk/6.0.100")
        b = DotNetSdkInstance.create(Version.parse("6.0.100"), "/sdk/6.0.100")
        assert a == b


class TestQueryOptions:
    """Tests for QueryOptions filtering."""

    def _instances(self):
        return [
            VisualStudioInstance.create("DEVCONSOLE", "/a", None, DiscoveryType.DEVELOPER_CONSOLE),
            VisualStudioInstance.create("VS", "/b", None, DiscoveryType.VISUAL_STUDIO_SETUP),
            DotNetSdkInstance.create(Version.parse("6.0.100"), "/c"),
        ]

    def test_default_matches_everything(self):
        assert all(QueryOptions.DEFAULT.matches(i) for i in self._instances())
        assert QueryOptions.DEFAULT.discovery_types == DiscoveryType.ALL

    def test_catalog_only(self):
        options = QueryOptions(discovery_types=DiscoveryType.VISUAL_STUDIO_SETUP)
        matched = [i for i in self._instances() if options.matches(i)]

        assert [i.discovery_type for i in matched] == [DiscoveryType.VISUAL_STUDIO_SETUP]

    def test_combined_mask(self):
        options = QueryOptions(
            discovery_types=DiscoveryType.DEVELOPER_CONSOLE | DiscoveryType.DOTNET_SDK
        )
        matched = [i.name for i in self._instances() if options.matches(i)]

        assert matched == ["DEVCONSOLE", ".NET Core SDK"]
