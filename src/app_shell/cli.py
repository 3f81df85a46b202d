import argparse
import logging
import sys
from pathlib import Path

from src.components.icons import IconExportError, default_icon_input
from src.components.icons import run as export_icons
from src.components.icons.adapters import SubprocessRunner, default_directories
from src.components.style_tokens import (
    TAILWIND_CONFIG,
    WriteConfigInput,
    default_files,
    render_tailwind_config,
    run_write,
    validate_style_config,
)
from src.config import AssetsConfig, load_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

CONFIG_FILENAME = "assets.yaml"
COMPLETION_MESSAGE = "Icon generation complete!"


def get_config(args: argparse.Namespace) -> AssetsConfig:
    config_path = Path(args.config) if args.config else None
    try:
        return load_config(config_path, default_path=Path(args.project_root) / CONFIG_FILENAME)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


def handle_icons(config: AssetsConfig, args: argparse.Namespace) -> None:
    inp = default_icon_input(
        Path(args.project_root),
        icon_dir=config.icons.icon_dir,
        source_name=config.icons.source,
    )
    try:
        export_icons(inp, runner=SubprocessRunner(), fs=default_directories, tool=config.icons.tool)
    except IconExportError as e:
        logger.error(str(e))
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot prepare icon directory {inp.icon_dir}: {e}")
        sys.exit(1)

    print(COMPLETION_MESSAGE)


def handle_tailwind(config: AssetsConfig, args: argparse.Namespace) -> None:
    if args.print:
        print(render_tailwind_config(TAILWIND_CONFIG), end="")
        return

    # Relative paths resolve against the project root; absolute ones are kept
    output_dir = Path(args.project_root) / (args.output_dir or config.style.output_dir)
    result = run_write(
        WriteConfigInput(output_dir=output_dir, filename=config.style.filename),
        fs=default_files,
    )
    if not result.success:
        for error in result.errors:
            logger.error(error)
        sys.exit(1)

    print(f"Tailwind config written: {result.path}")


def handle_check(config: AssetsConfig, args: argparse.Namespace) -> None:
    result = validate_style_config(TAILWIND_CONFIG)
    for warning in result.warnings:
        print(f"WARN: {warning}")
    if not result.is_valid:
        for violation in result.violations:
            print(f"FAIL: {violation}")
        sys.exit(1)

    print("Style tokens valid.")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Tauri desktop asset generator")
    parser.add_argument("--project-root", default=".", help="Project root (default: cwd)")
    parser.add_argument("--config", help=f"Path to config YAML (default: {CONFIG_FILENAME})")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # icons
    subparsers.add_parser("icons", help="Render the app icon set from icon.svg")

    # tailwind
    tailwind_parser = subparsers.add_parser("tailwind", help="Write tailwind.config.js")
    tailwind_parser.add_argument(
        "--output-dir", help="Directory to write into, relative to --project-root"
    )
    tailwind_parser.add_argument(
        "--print", action="store_true", help="Print to stdout instead of writing"
    )

    # check
    subparsers.add_parser("check", help="Validate the style tokens")

    args = parser.parse_args(argv)

    config = get_config(args)

    if args.command == "icons":
        handle_icons(config, args)
    elif args.command == "tailwind":
        handle_tailwind(config, args)
    elif args.command == "check":
        handle_check(config, args)


if __name__ == "__main__":
    main()
