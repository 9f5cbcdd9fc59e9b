from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List
import sys

from .packaging.bundle_id import resolve_app_identifier
from .packaging.errors import InvalidIdentifier
from .packaging.pipeline import CookingData, PackagingPipeline
from .packaging.platform_settings import (
    ARCHITECTURE,
    NATIVE_LIBRARY_EXTENSION,
    PLATFORM_DISPLAY_NAME,
    PLATFORM_NAME,
    PackagingConfig,
    load_packaging_config,
)
from .packaging.project_template import DEFAULT_TEMPLATE_DIR, validate_template
from .packaging.texture_format import downgrade


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="xcpack", description="Turn a cooked game build into an Xcode project")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    sub = parser.add_subparsers(dest="cmd")

    # package: generate the Xcode project from cooked output
    p_pkg = sub.add_parser("package", help="Generate the Xcode project in a cooked output directory")
    p_pkg.add_argument("output", type=str, help="Output directory (cooked files live in <game>/Data)")
    p_pkg.add_argument("--config", type=str, default=None, help="Packaging settings JSON file")
    p_pkg.add_argument("--template", type=str, default=None, help="Xcode project template directory")
    p_pkg.add_argument("--product-name", type=str, default=None, help="Override product name")
    p_pkg.add_argument("--company-name", type=str, default=None, help="Override company name")
    p_pkg.add_argument("--team-id", type=str, default=None, help="Override Apple development team ID")
    p_pkg.add_argument("--icon", type=str, default=None, help="Square image used for the app icon set")
    p_pkg.add_argument("--skip-packaging", action="store_true", help="Only generate the project")
    p_pkg.add_argument("--debug", action="store_true", help="Report unresolved or unused placeholders")

    p_id = sub.add_parser("identifier", help="Resolve an app identifier template")
    p_id.add_argument("template", type=str, help="eg. com.${COMPANY_NAME}.${PROJECT_NAME}")
    p_id.add_argument("--product-name", type=str, required=True)
    p_id.add_argument("--company-name", type=str, required=True)

    p_tex = sub.add_parser("texture-format", help="Show the iOS texture format used for a pixel format")
    p_tex.add_argument("format", type=str, help="Pixel format name, eg. BC3_UNorm")

    p_val = sub.add_parser("validate-template", help="Check an Xcode project template")
    p_val.add_argument("template", type=str, nargs="?", default=None, help="Template directory (default: bundled)")
    p_val.add_argument("--game-folder", type=str, default="Game")

    sub.add_parser("platform", help="Show the target platform description")

    args = parser.parse_args(list(argv) if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "package":
        return _cmd_package(args)

    if args.cmd == "identifier":
        try:
            print(resolve_app_identifier(args.template, args.product_name, args.company_name))
        except InvalidIdentifier as e:
            print(e)
            return 2
        return 0

    if args.cmd == "texture-format":
        try:
            print(downgrade(args.format).name)
        except ValueError as e:
            print(e)
            return 2
        return 0

    if args.cmd == "platform":
        print(json.dumps({
            "name": PLATFORM_NAME,
            "display_name": PLATFORM_DISPLAY_NAME,
            "architecture": ARCHITECTURE,
            "native_library_extension": NATIVE_LIBRARY_EXTENSION,
        }, indent=2))
        return 0

    if args.cmd == "validate-template":
        result = validate_template(Path(args.template) if args.template else None, args.game_folder)
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return 0 if result["valid"] else 1

    parser.print_help()
    return 2


def _cmd_package(args: argparse.Namespace) -> int:
    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        print(f"Config not found: {config_path}")
        return 2
    try:
        config: PackagingConfig = load_packaging_config(config_path)
    except (ValueError, TypeError) as e:
        print(f"Invalid config {config_path}: {e}")
        return 2

    if args.product_name is not None:
        config.game.product_name = args.product_name
    if args.company_name is not None:
        config.game.company_name = args.company_name
    if args.team_id is not None:
        config.ios.app_team_id = args.team_id
    if args.icon is not None:
        config.ios.icon = args.icon
    if args.skip_packaging:
        config.build.skip_packaging = True
    if args.debug:
        config.build.debug = True

    output = Path(args.output).resolve()
    if not output.exists():
        print(f"Output dir not found: {output}")
        return 2

    data = CookingData(
        output_path=output,
        template_dir=Path(args.template).resolve() if args.template else DEFAULT_TEMPLATE_DIR,
        game_folder=config.build.game_folder,
    )
    result = PackagingPipeline(config, data).run()
    print(result.message)
    for warning in result.warnings:
        print(f"  warning: {warning}")
    for line in result.diagnostics:
        print(f"  {line}")
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
