"""Stamp one version number into AssemblyInfo.cs, AndroidManifest.xml and Info.plist."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, NamedTuple, Sequence

from .android_manifest import is_valid_android_manifest, update_android_manifest
from .apple_plist import is_valid_touch_plist, update_touch_plist
from .assembly_info import is_valid_assembly_info, update_assembly_info
from .version import VersionInfo

log = logging.getLogger(__name__)

ERROR_PREFIX = "An unexpected error was encountered:"


class Target(NamedTuple):
    kind: str
    path: str
    validator: Callable[[str], bool]
    patcher: Callable[[str, VersionInfo], None]


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be equal or greater than zero: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="update-version-info",
        description=__doc__,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--major", "-v", type=non_negative_int, default=1,
        help="A numeric major version number equal or greater than zero (default: %(default)s).",
    )
    parser.add_argument(
        "--minor", "-m", type=non_negative_int, default=0,
        help="A numeric minor number equal or greater than zero (default: %(default)s).",
    )
    parser.add_argument(
        "--build", "-b", type=non_negative_int, default=0,
        help="A numeric build number equal or greater than zero (default: %(default)s).",
    )
    parser.add_argument(
        "--revision", "-r", type=non_negative_int, default=0,
        help="A numeric revision number equal or greater than zero (default: %(default)s).",
    )
    parser.add_argument(
        "--versionCsPath", "-p", "--path", dest="version_cs_path", metavar="PATH",
        help="The path to a C# file to update with version information.",
    )
    parser.add_argument(
        "--androidManifestPath", "-a", "--androidManifest", dest="android_manifest_path", metavar="PATH",
        help="The path to an android manifest file to update with version information.",
    )
    parser.add_argument(
        "--touchPlistPath", "-t", "--touchPlist", dest="touch_plist_path", metavar="PATH",
        help="The path to an iOS plist file to update with version information.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log why files are skipped.")
    return parser


def build_targets(args: argparse.Namespace) -> list[Target]:
    candidates = [
        Target("CSharpAssemblyInfo", args.version_cs_path, is_valid_assembly_info, update_assembly_info),
        Target("AndroidManifest", args.android_manifest_path, is_valid_android_manifest, update_android_manifest),
        Target("ApplePlist", args.touch_plist_path, is_valid_touch_plist, update_touch_plist),
    ]
    return [target for target in candidates if target.path]


def run(version: VersionInfo, targets: Iterable[Target]) -> int:
    """Patch every target that passes its validator; return 1 if any target failed.

    Failures are reported per target and the remaining targets still run.
    """
    status = 0
    for target in targets:
        try:
            if not target.validator(target.path):
                log.info("skip: %s (not a patchable %s file)", target.path, target.kind)
                continue
            target.patcher(target.path, version)
        except Exception as exc:
            print(f"{ERROR_PREFIX}{exc}")
            log.debug("%s update failed for %s", target.kind, target.path, exc_info=True)
            status = 1
    return status


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    version = VersionInfo(args.major, args.minor, args.build, args.revision)
    return run(version, build_targets(args))


if __name__ == "__main__":
    sys.exit(main())
