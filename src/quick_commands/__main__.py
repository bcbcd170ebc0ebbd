"""Entry point for the quick-commands command line."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from quick_commands import __version__
from quick_commands.adapters.local import JsonConfigStore, LocalFileSystem
from quick_commands.config import get_settings
from quick_commands.config.settings import Settings
from quick_commands.models.button import ConfigurationTarget
from quick_commands.models.export_import import ImportStrategy
from quick_commands.services.export_import_service import ExportImportService


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="quick-commands",
        description="Export, import and preview Quick Command Buttons configurations",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    scopes = [target.value for target in ConfigurationTarget]
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser("export", help="Export a scope to a file")
    export_parser.add_argument("--scope", choices=scopes)
    export_parser.add_argument("--output", type=Path, help="Output file path")

    import_parser = subparsers.add_parser("import", help="Import a file into a scope")
    import_parser.add_argument("file", type=Path)
    import_parser.add_argument("--scope", choices=scopes)
    import_parser.add_argument(
        "--strategy", choices=[strategy.value for strategy in ImportStrategy]
    )

    preview_parser = subparsers.add_parser(
        "preview", help="Show what importing a file would change"
    )
    preview_parser.add_argument("file", type=Path)
    preview_parser.add_argument("--scope", choices=scopes)

    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Run one command and print its result as JSON.

    Returns:
        Process exit status
    """
    store = JsonConfigStore(settings)
    file_system = LocalFileSystem(
        open_path=getattr(args, "file", None),
        save_path=getattr(args, "output", None),
    )
    service = ExportImportService(store, file_system, settings=settings)

    scope = (
        ConfigurationTarget(args.scope)
        if args.scope
        else await store.get_configuration_target()
    )

    if args.command == "export":
        result = await service.export_configuration(scope)
    elif args.command == "import":
        result = await service.import_configuration(
            scope, args.file, ImportStrategy(args.strategy) if args.strategy else None
        )
    else:
        result = await service.preview_import(scope, args.file)

    print(json.dumps(result.model_dump(mode="json", exclude_none=True), indent=2))
    return 0 if result.success else 1


def cli(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(asyncio.run(run(args, settings)))


if __name__ == "__main__":
    cli()
