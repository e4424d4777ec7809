import xml.etree.ElementTree as ET

import pytest

from update_version_info import cli
from update_version_info.android_manifest import ANDROID_NS
from update_version_info.version import VersionInfo

ASSEMBLY_INFO = '[assembly: AssemblyVersion("1.0.0.0")]\n[assembly: AssemblyFileVersion("1.0.0.0")]\n'
MANIFEST = '<manifest xmlns:android="http://schemas.android.com/apk/res/android"/>'
INFO_PLIST = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0"><dict>
<key>CFBundleShortVersionString</key><string>0.0</string>
<key>CFBundleVersion</key><string>0.0</string>
</dict></plist>
"""


@pytest.fixture
def project(tmp_path):
    files = {
        "cs": tmp_path / "AssemblyInfo.cs",
        "manifest": tmp_path / "AndroidManifest.xml",
        "plist": tmp_path / "Info.plist",
    }
    files["cs"].write_text(ASSEMBLY_INFO, encoding="utf-8")
    files["manifest"].write_text(MANIFEST, encoding="utf-8")
    files["plist"].write_text(INFO_PLIST, encoding="utf-8")
    return files


def test_no_arguments_prints_help(capsys):
    assert cli.main([]) == 0

    out = capsys.readouterr().out
    assert "--versionCsPath" in out
    assert "--touchPlistPath" in out


def test_stamps_all_three_files(project):
    status = cli.main(
        [
            "--major", "2", "-m", "3", "-b", "45", "-r", "6",
            "--path", str(project["cs"]),
            "-a", str(project["manifest"]),
            "--touchPlist", str(project["plist"]),
        ]
    )

    assert status == 0
    cs = project["cs"].read_text(encoding="utf-8")
    assert '[assembly: System.Reflection.AssemblyVersion("2.3.45.6")]' in cs
    assert '[assembly: System.Reflection.AssemblyFileVersion("2.3.45.6")]' in cs

    manifest = ET.parse(project["manifest"]).getroot()
    assert manifest.get(f"{{{ANDROID_NS}}}versionCode") == "45"
    assert manifest.get(f"{{{ANDROID_NS}}}versionName") == "2.3"

    plist = project["plist"].read_text(encoding="utf-8")
    assert "<string>2.3</string>" in plist
    assert "<string>45.6</string>" in plist


def test_defaults_to_version_one(project):
    assert cli.main(["-p", str(project["cs"])]) == 0

    assert 'AssemblyVersion("1.0.0.0")' in project["cs"].read_text(encoding="utf-8")


def test_missing_and_empty_paths_are_skipped(tmp_path, capsys):
    status = cli.main(["-v", "1", "-p", str(tmp_path / "missing.cs"), "-a", ""])

    assert status == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("flag", ["--major", "-m", "--build", "-r"])
def test_negative_components_are_rejected(flag):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([flag, "-1"])

    assert excinfo.value.code == 2


def test_build_targets_keeps_only_given_paths(project):
    args = cli.build_parser().parse_args(["-t", str(project["plist"])])

    targets = cli.build_targets(args)

    assert [target.kind for target in targets] == ["ApplePlist"]


def test_failing_target_is_reported_and_others_still_run(project, capsys):
    def explode(path, version):
        raise RuntimeError("disk on fire")

    targets = [
        cli.Target("AndroidManifest", str(project["manifest"]), lambda path: True, explode),
        cli.Target("ApplePlist", str(project["plist"]), cli.is_valid_touch_plist, cli.update_touch_plist),
    ]

    status = cli.run(VersionInfo(1, 4, 22, 3), targets)

    assert status == 1
    assert capsys.readouterr().out == "An unexpected error was encountered:disk on fire\n"
    assert "<string>22.3</string>" in project["plist"].read_text(encoding="utf-8")


def test_unprobeable_paths_are_skipped(tmp_path, capsys):
    too_long = str(tmp_path / ("a" * 300))

    status = cli.main(["-p", too_long, "-a", too_long, "-t", too_long])

    assert status == 0
    assert capsys.readouterr().out == ""


def test_failing_validator_is_reported_and_others_still_run(project, capsys):
    def broken(path):
        raise OSError("permission denied")

    targets = [
        cli.Target("CSharpAssemblyInfo", str(project["cs"]), broken, cli.update_assembly_info),
        cli.Target("ApplePlist", str(project["plist"]), cli.is_valid_touch_plist, cli.update_touch_plist),
    ]

    status = cli.run(VersionInfo(1, 4, 22, 3), targets)

    assert status == 1
    assert capsys.readouterr().out == "An unexpected error was encountered:permission denied\n"
    assert project["cs"].read_text(encoding="utf-8") == ASSEMBLY_INFO
    assert "<string>22.3</string>" in project["plist"].read_text(encoding="utf-8")
