"""Unit tests for the family classifier."""

import pytest

from osfamily.classifier import classify
from osfamily.errors import ClassificationError, InvalidArgumentError
from osfamily.families import valid_families
from osfamily.snapshot import Snapshot


def snap(name: str, sep: str = ":") -> Snapshot:
    return Snapshot(name=name, arch="x86", version="1", path_separator=sep)


class TestWindows:
    """Windows, 9x/NT split and dos overlap."""

    def test_windows_10(self, windows10):
        assert classify("windows", windows10)
        assert not classify("win9x", windows10)
        assert classify("winnt", windows10)
        assert classify("dos", windows10)
        assert not classify("unix", windows10)

    def test_windows_me_is_9x(self, windows_me):
        assert classify("win9x", windows_me)
        assert not classify("winnt", windows_me)

    @pytest.mark.parametrize("name", ["windows 95", "windows 98", "windows ce"])
    def test_other_9x_names(self, name):
        assert classify("win9x", snap(name, ";"))

    def test_9x_markers_need_windows(self):
        assert not classify("win9x", snap("acme 98", ";"))
        assert not classify("winnt", snap("acme 98", ";"))


class TestUnixAndMac:
    """Unix rules and their interplay with mac and openvms."""

    def test_mac_os_x(self, mac_os_x):
        assert classify("mac", mac_os_x)
        assert classify("unix", mac_os_x)
        assert not classify("dos", mac_os_x)

    def test_darwin_is_mac_and_unix(self):
        darwin = snap("darwin")
        assert classify("mac", darwin)
        assert classify("unix", darwin)

    def test_classic_mac_is_not_unix(self):
        classic = snap("mac os")
        assert classify("mac", classic)
        assert not classify("unix", classic)

    def test_linux(self, linux):
        assert classify("unix", linux)
        assert not classify("mac", linux)
        assert not classify("windows", linux)

    def test_openvms_is_not_unix(self):
        vms = snap("openvms")
        assert classify("openvms", vms)
        assert not classify("unix", vms)

    def test_unix_needs_colon_separator(self):
        assert not classify("unix", snap("linux", ";"))


class TestOtherFamilies:
    """Single-substring families."""

    def test_zos_overlaps_unix(self, zos):
        assert classify("z/os", zos)
        assert classify("unix", zos)

    def test_os390_is_zos(self):
        assert classify("z/os", snap("os/390"))

    def test_netware_is_not_dos(self):
        netware = snap("netware", ";")
        assert classify("netware", netware)
        assert not classify("dos", netware)

    def test_os2(self):
        os2 = snap("os/2", ";")
        assert classify("os/2", os2)
        assert classify("dos", os2)

    def test_tandem(self):
        assert classify("tandem", snap("nonstop_kernel"))

    def test_os400(self):
        assert classify("os/400", snap("os/400"))
        assert not classify("os/400", snap("os/2"))


class TestErrors:
    """Unknown and missing family tokens."""

    @pytest.mark.parametrize("family", sorted(valid_families()))
    def test_every_registered_family_classifies(self, family, linux):
        assert classify(family, linux) in (True, False)

    @pytest.mark.parametrize("family", ["linux", "", "Windows", "posix"])
    def test_unknown_family_raises(self, family, linux):
        with pytest.raises(ClassificationError) as exc_info:
            classify(family, linux)
        assert exc_info.value.family == family

    def test_none_family_raises(self, linux):
        with pytest.raises(InvalidArgumentError):
            classify(None, linux)
