"""Tests for winrt_pack.nuget (descriptor resolution and nuget pack)."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from winrt_pack.errors import (
    AmbiguousDescriptor,
    MissingVersionFile,
    NoDescriptorFound,
    NoPackageDirectory,
    PackFailed,
    UnreadablePackageDirectory,
    UnreadableVersionFile,
)
from winrt_pack.nuget import (
    PackageDescriptor,
    files_with_extension,
    find_nuspec,
    pack,
    pack_command,
    read_version,
    resolve_descriptor,
)


class TestFilesWithExtension:
    def test_non_recursive_exact_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "a.nuspec").write_text("")
        (tmp_path / "b.NUSPEC").write_text("")
        (tmp_path / "c.nuspec.bak").write_text("")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "d.nuspec").write_text("")
        (tmp_path / "dir.nuspec").mkdir()
        assert files_with_extension(tmp_path, "nuspec") == [tmp_path / "a.nuspec"]

    def test_accepts_leading_dot(self, tmp_path: Path) -> None:
        (tmp_path / "a.nuspec").write_text("")
        assert files_with_extension(tmp_path, ".nuspec") == [tmp_path / "a.nuspec"]

    def test_unlistable_directory_raises(self, tmp_path: Path) -> None:
        with patch.object(Path, "iterdir", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(UnreadablePackageDirectory) as exc_info:
                files_with_extension(tmp_path, "nuspec")
        assert exc_info.value.path == tmp_path
        assert "Permission denied" in str(exc_info.value)


class TestFindNuspec:
    def test_none(self, tmp_path: Path) -> None:
        (tmp_path / "VERSION").write_text("1.0.0")
        with pytest.raises(NoDescriptorFound):
            find_nuspec(tmp_path)

    def test_two_is_ambiguous(self, tmp_path: Path) -> None:
        (tmp_path / "a.nuspec").write_text("")
        (tmp_path / "b.nuspec").write_text("")
        with pytest.raises(AmbiguousDescriptor) as exc_info:
            find_nuspec(tmp_path)
        assert exc_info.value.count == 2
        assert "2" in str(exc_info.value)

    def test_single(self, nuget_tree: tuple[Path, Path]) -> None:
        _, nuget = nuget_tree
        assert find_nuspec(nuget) == nuget / "Component.nuspec"


class TestReadVersion:
    def test_verbatim(self, tmp_path: Path) -> None:
        (tmp_path / "VERSION").write_bytes(b"1.2.3-rc.1\r\n")
        assert read_version(tmp_path) == "1.2.3-rc.1\r\n"

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(MissingVersionFile):
            read_version(tmp_path)

    def test_directory_named_version_is_unreadable(self, tmp_path: Path) -> None:
        (tmp_path / "VERSION").mkdir()
        with pytest.raises(UnreadableVersionFile):
            read_version(tmp_path)

    def test_undecodable(self, tmp_path: Path) -> None:
        (tmp_path / "VERSION").write_bytes(b"\xff\xfe1.0")
        with pytest.raises(UnreadableVersionFile):
            read_version(tmp_path)


class TestResolveDescriptor:
    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(NoPackageDirectory):
            resolve_descriptor(tmp_path / "nuget")

    def test_descriptor_checked_before_version(self, tmp_path: Path) -> None:
        (tmp_path / "nuget").mkdir()
        with pytest.raises(NoDescriptorFound):
            resolve_descriptor(tmp_path / "nuget")

    def test_resolves_path_and_version(self, nuget_tree: tuple[Path, Path]) -> None:
        _, nuget = nuget_tree
        assert resolve_descriptor(nuget) == PackageDescriptor(
            nuspec=nuget / "Component.nuspec", version="1.2.3"
        )

    def test_version_missing(self, nuget_tree: tuple[Path, Path]) -> None:
        _, nuget = nuget_tree
        (nuget / "VERSION").unlink()
        with pytest.raises(MissingVersionFile):
            resolve_descriptor(nuget)

    def test_custom_names(self, tmp_path: Path) -> None:
        (tmp_path / "pkg.spec").write_text("")
        (tmp_path / "version.txt").write_text("2.0.0\n")
        d = resolve_descriptor(tmp_path, ext="spec", version_file="version.txt")
        assert d == PackageDescriptor(nuspec=tmp_path / "pkg.spec", version="2.0.0\n")


class TestPack:
    def test_command(self) -> None:
        assert pack_command(Path("nuget/C.nuspec"), "1.2.3") == [
            "nuget",
            "pack",
            str(Path("nuget/C.nuspec")),
            "-version",
            "1.2.3",
        ]

    def test_runs_once(self, capsys: pytest.CaptureFixture[str]) -> None:
        d = PackageDescriptor(nuspec=Path("nuget/C.nuspec"), version="1.2.3")
        with patch("winrt_pack.nuget.pack.subprocess.run") as m_run:
            m_run.return_value = MagicMock(returncode=0)
            pack(d)
        assert m_run.call_count == 1
        (cmd,) = m_run.call_args[0]
        assert cmd == pack_command(d.nuspec, d.version)
        assert capsys.readouterr().out == "Packing...\n"

    def test_nonzero_exit_raises(self) -> None:
        d = PackageDescriptor(nuspec=Path("nuget/C.nuspec"), version="1.2.3")
        with patch("winrt_pack.nuget.pack.subprocess.run") as m_run:
            m_run.return_value = MagicMock(returncode=1)
            with pytest.raises(PackFailed):
                pack(d)
        assert m_run.call_count == 1

    def test_missing_nuget_raises(self) -> None:
        d = PackageDescriptor(nuspec=Path("nuget/C.nuspec"), version="1.2.3")
        with patch("winrt_pack.nuget.pack.subprocess.run", side_effect=FileNotFoundError("nuget")):
            with pytest.raises(PackFailed):
                pack(d)

    def test_nul_in_version_raises_pack_failed(self) -> None:
        d = PackageDescriptor(nuspec=Path("nuget/C.nuspec"), version="1.2.3\x00")
        with patch(
            "winrt_pack.nuget.pack.subprocess.run",
            side_effect=ValueError("embedded null byte"),
        ):
            with pytest.raises(PackFailed) as exc_info:
                pack(d)
        assert "embedded null byte" in str(exc_info.value)
