"""controller-detect command-line entry point."""

import argparse
import logging
import sys
from typing import Optional, TextIO

from controller_detect import __version__, config
from controller_detect.controllers.capabilities import capabilities_to_strings
from controller_detect.controllers.manager import DeviceManager
from controller_detect.errors import EnumerationError, UnsupportedPlatformError
from controller_detect.factory import new_device_manager
from controller_detect.models import DetectionResult

PROG = "controller-detect"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Detect game controllers connected to this computer")
    parser.add_argument("--version", action="store_true", help="show app version")
    subparsers = parser.add_subparsers(dest="command")

    detect = subparsers.add_parser("detect", help="Detect controllers connected to your computer")
    detect.add_argument("-v", "--verbose", action="store_true", help="show detailed information")
    detect.add_argument("--json", action="store_true", help="print the detection result as JSON")
    return parser


def write_results(out: TextIO, result: DetectionResult, verbose: bool = False) -> None:
    """Print a detection result as a tree."""
    if not result.controllers:
        out.write("No controllers found.\n")
    else:
        out.write(f"Found {len(result.controllers)} controller(s):\n\n")

    for i, info in enumerate(result.controllers):
        out.write(f"[{i}] {info.name} ({info.path})\n")
        out.write(f" ├─ Type: {info.type}\n")
        out.write(" ├─ Vendor:\n")
        out.write(f" │  ├─ ID: {info.vendor_id:04X}\n")
        out.write(f" │  └─ Name: {info.vendor_name}\n")
        out.write(f" ├─ Product ID: {info.product_id:04X}\n")
        out.write(" └─ Capabilities:\n")

        caps = capabilities_to_strings(info.capabilities)
        if not caps:
            out.write("    └─ None detected\n")
        for j, cap in enumerate(caps):
            prefix = "    └─ " if j == len(caps) - 1 else "    ├─ "
            out.write(f"{prefix}{cap}\n")
        out.write("\n")

    if result.errors:
        out.write("Errors encountered:\n")
        for error in result.errors:
            out.write(f"  • {error}\n")

    if verbose and result.controllers:
        out.write("Verbose Information:\n")
        for i, info in enumerate(result.controllers):
            out.write(f"  [{i}] Full path: {info.path}\n")


def log_level(name: str) -> int:
    """Numeric level for a level name; unknown names mean WARNING."""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else log_level(config.LOG_LEVEL)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def run(
    argv: Optional[list[str]] = None,
    manager: Optional[DeviceManager] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run the CLI and return the process exit code."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        stdout.write(f"{PROG} {__version__}\n")
        return 0

    if args.command != "detect":
        parser.print_help(stdout)
        return 0

    _configure_logging(args.verbose)

    try:
        manager = manager or new_device_manager()
        result = manager.list_controllers()
    except (EnumerationError, UnsupportedPlatformError) as e:
        stderr.write(f"Error: {e}\n")
        return 1

    if args.json:
        stdout.write(result.model_dump_json(indent=2) + "\n")
    else:
        write_results(stdout, result, verbose=args.verbose)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
