"""
Command line entry point for mcassets.
Usage: python -m mcassets [--archive PATH] [--pack KEY=PATH ...] [--namespace NS] [--settings INI] COMMAND
"""

import argparse
import asyncio
import dataclasses
import logging
import sys
import zipfile
from typing import Any, List, Optional

import orjson

from .assets import AssetService
from .assets.errors import AssetError
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcassets", description="Resolve block states and models from game archives."
    )
    parser.add_argument(
        "--archive",
        help="primary jar, zip or pack directory (defaults to the configured one)",
    )
    parser.add_argument(
        "--pack",
        action="append",
        default=[],
        metavar="KEY=PATH",
        help="auxiliary archive, consulted after the primary one (repeatable)",
    )
    parser.add_argument("--namespace", help="namespace for names without a prefix")
    parser.add_argument("--settings", help="INI file to read settings from")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("blocks", help="list block state names")
    model = commands.add_parser("model", help="resolve a model with its parent chain")
    model.add_argument("name")
    blockstate = commands.add_parser("blockstate", help="resolve the default model of a block")
    blockstate.add_argument("name")
    meta = commands.add_parser("texture-meta", help="show texture animation metadata")
    meta.add_argument("name")
    return parser


def _open_service(args: argparse.Namespace, settings: AppSettings) -> AssetService:
    primary = args.archive or settings.primary_archive
    if not primary:
        raise ConfigError("No archive given and no primary archive configured")

    service = AssetService(
        primary,
        args.namespace or settings.resolver.default_namespace,
        root_model=settings.resolver.root_model,
    )
    service.register_packs(settings.packs.packs)

    for pack in args.pack:
        key, sep, path = pack.partition("=")
        if not sep or not key or not path:
            raise ConfigError(f"Invalid --pack value, expected KEY=PATH: {pack}")
        service.register_source(key, path)
    return service


async def run(args: argparse.Namespace, settings: AppSettings) -> Any:
    """Execute one command and return its JSON-serializable result."""
    async with _open_service(args, settings) as service:
        if args.command == "blocks":
            return await service.block_states.get_block_state_names(args.namespace)
        if args.command == "model":
            return await service.get_model(args.name, args.namespace)
        if args.command == "blockstate":
            return await service.get_block_model(args.name, args.namespace)
        if args.command == "texture-meta":
            meta = await service.get_texture_metadata(args.name, args.namespace)
            return dataclasses.asdict(meta) if meta else None
    raise ConfigError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    try:
        settings = AppSettings(settings_file=args.settings)
        setup_logging(settings)

        validation = settings.validate()
        for warning in validation.warnings:
            logger.debug(f"Configuration warning: {warning}")
        if not args.archive and not validation.is_valid:
            for error in validation.errors:
                logger.error(f"  {error}")
            return 1

        result = asyncio.run(run(args, settings))
    except (AssetError, ConfigError, OSError, zipfile.BadZipFile) as e:
        logger.error(str(e))
        return 1

    sys.stdout.write(orjson.dumps(result, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
