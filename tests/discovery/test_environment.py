"""
Tests for msbuildlocator.discovery.environment module.
"""

from pathlib import Path

from msbuildlocator.core.config import DeveloperConsoleConfig
from msbuildlocator.core.version import Version
from msbuildlocator.discovery.environment import DeveloperConsoleProbe
from msbuildlocator.discovery.instances import DiscoveryType


class TestDeveloperConsoleProbe:
    """Tests for DeveloperConsoleProbe."""

    def test_no_install_dir(self):
        probe = DeveloperConsoleProbe(environ={"VSCMD_VER": "17.4.0"})
        assert probe.probe() is None

    def test_empty_install_dir(self):
        probe = DeveloperConsoleProbe(environ={"VSINSTALLDIR": ""})
        assert probe.probe() is None

    def test_version_from_vscmd_ver(self):
        probe = DeveloperConsoleProbe(
            environ={
                "VSINSTALLDIR": "/vs/2022",
                "VSCMD_VER": "17.4.2",
                "VisualStudioVersion": "16.0",
            }
        )

        inst = probe.probe()

        assert inst is not None
        assert inst.name == "DEVCONSOLE"
        assert inst.discovery_type is DiscoveryType.DEVELOPER_CONSOLE
        assert inst.version == Version.parse("17.4.2")
        assert inst.visual_studio_root_path == Path("/vs/2022")
        assert inst.msbuild_path == Path("/vs/2022/MSBuild/15.0/Bin")

    def test_fallback_when_first_missing(self):
        probe = DeveloperConsoleProbe(
            environ={"VSINSTALLDIR": "/vs", "VisualStudioVersion": "16.0"}
        )

        assert probe.probe().version == Version.parse("16.0")

    def test_fallback_when_first_unparsable(self):
        probe = DeveloperConsoleProbe(
            environ={
                "VSINSTALLDIR": "/vs",
                "VSCMD_VER": "17.4.2-pre",
                "VisualStudioVersion": "17.0",
            }
        )

        assert probe.probe().version == Version.parse("17.0")

    def test_no_version_still_returns_instance(self):
        probe = DeveloperConsoleProbe(
            environ={"VSINSTALLDIR": "/vs", "VSCMD_VER": "bogus"}
        )

        inst = probe.probe()

        assert inst is not None
        assert inst.version is None

    def test_custom_variables(self):
        config = DeveloperConsoleConfig(
            install_dir_variable="MY_VS", version_variables=("MY_VS_VER",)
        )
        probe = DeveloperConsoleProbe(
            environ={"MY_VS": "/vs", "MY_VS_VER": "15.9"}, config=config
        )

        inst = probe.probe()

        assert inst.version == Version.parse("15.9")

    def test_custom_subpath(self):
        probe = DeveloperConsoleProbe(
            environ={"VSINSTALLDIR": "/vs"},
            msbuild_subpath=("MSBuild", "Current", "Bin"),
        )

        assert probe.probe().msbuild_path == Path("/vs/MSBuild/Current/Bin")

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("VSINSTALLDIR", "/vs/from-env")
        monkeypatch.delenv("VSCMD_VER", raising=False)
        monkeypatch.setenv("VisualStudioVersion", "17.0")

        inst = DeveloperConsoleProbe().probe()

        assert inst.visual_studio_root_path == Path("/vs/from-env")
        assert inst.version == Version.parse("17.0")
