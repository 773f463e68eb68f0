import argparse
import logging
import os
import sys
from pathlib import Path

import httpx

from designkit.adapters.bridge_client import BridgeClient
from designkit.adapters.snapshot_store import FilePresetStore, FileSnapshotStore
from designkit.adapters.sync import DebouncedSync
from designkit.app_shell.config import AppConfig, load_config
from designkit.catalog import DEFAULT_CATALOG_PATH, load_checked_catalog
from designkit.components.export import ALL_FORMATS, UnknownFormatError, bundle_exports
from designkit.services.session import Session

logger = logging.getLogger("cli")


def get_config(args: argparse.Namespace) -> AppConfig:
    try:
        return load_config(Path(args.config) if args.config else None)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)


def get_session(config: AppConfig) -> tuple[Session, DebouncedSync]:
    """Session restored from the snapshot, with changes written back through a debounced sync."""
    try:
        catalog = load_checked_catalog(config.catalog_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Catalog error: {e}")
        sys.exit(1)

    snapshots = FileSnapshotStore(config.state_dir)
    session = Session(
        catalog,
        FilePresetStore(config.state_dir),
        history_limit=config.history_limit,
        state=snapshots.get(),
    )
    sync = DebouncedSync(snapshots, debounce_ms=config.sync_debounce_ms)
    session.subscribe(sync)
    return session, sync


def handle_serve(config: AppConfig, args: argparse.Namespace) -> None:
    import uvicorn

    # The API process resolves its own settings from the environment
    if args.config:
        os.environ["DESIGNKIT_CONFIG"] = str(Path(args.config).resolve())
    uvicorn.run(
        "designkit.api.main:app",
        host=args.host,
        port=args.port,
        log_level=config.log_level.lower(),
    )


def handle_export(config: AppConfig, args: argparse.Namespace) -> None:
    if FileSnapshotStore(config.state_dir).get() is None:
        logger.error(f"No state available in {config.state_dir}. Select something first.")
        sys.exit(1)

    session, _ = get_session(config)
    try:
        bundle = bundle_exports(session.config(), args.formats)
    except UnknownFormatError as e:
        logger.error(f"{e}. Valid: {', '.join(ALL_FORMATS)}")
        sys.exit(1)

    if args.stdout:
        if len(args.formats) > 1:
            logger.error("--stdout accepts a single format.")
            sys.exit(1)
        sys.stdout.write(bundle.content.decode("utf-8"))
        return

    out_dir = Path(args.output)
    out_dir.mkdir(parents=True, exist_ok=True)
    target = out_dir / bundle.file_name
    target.write_bytes(bundle.content)
    print(f"Exported {', '.join(args.formats)} to {target}")


def handle_import(config: AppConfig, args: argparse.Namespace) -> None:
    source = Path(args.file)
    if not source.exists():
        logger.error(f"File {source} not found.")
        sys.exit(1)

    session, sync = get_session(config)
    error = session.import_json(source.read_text(encoding="utf-8"))
    if error is not None:
        logger.error(error.message)
        sys.exit(1)

    sync.flush()
    print(f"Imported {len(session.selections)} selections from {source}.")


def handle_doctor(config: AppConfig, args: argparse.Namespace) -> None:
    ok = True

    catalog_path = config.catalog_path or DEFAULT_CATALOG_PATH
    try:
        catalog = load_checked_catalog(config.catalog_path)
        print(f"[ok]   catalog {catalog_path} ({len(catalog.categories())} categories)")
    except (FileNotFoundError, ValueError) as e:
        print(f"[fail] catalog {catalog_path}: {e}")
        ok = False

    state_dir = config.state_dir
    if state_dir.exists() and not os.access(state_dir, os.W_OK):
        print(f"[fail] state dir {state_dir} is not writable")
        ok = False
    else:
        print(f"[ok]   state dir {state_dir}")

    state = FileSnapshotStore(state_dir).get()
    if state is None:
        print("[warn] no snapshot yet")
    else:
        print(f"[ok]   snapshot with {len(state.selections)} selections")

    try:
        response = httpx.get(f"{config.server_url}/health", timeout=config.bridge_timeout_s)
        response.raise_for_status()
        print(f"[ok]   server {config.server_url}")
    except httpx.HTTPError as e:
        print(f"[warn] server {config.server_url} unreachable: {e}")

    if not ok:
        sys.exit(1)


def handle_bridge(config: AppConfig, args: argparse.Namespace) -> None:
    snapshots = FileSnapshotStore(config.state_dir)
    with BridgeClient(config.server_url, snapshots, timeout_s=config.bridge_timeout_s) as client:
        tool = client.tools()[args.tool]
        if args.tool in ("export", "token"):
            if not args.arg:
                logger.error(f"'{args.tool}' requires an argument.")
                sys.exit(1)
            print(tool(args.arg))
        else:
            print(tool())


HANDLERS = {
    "serve": handle_serve,
    "export": handle_export,
    "import": handle_import,
    "doctor": handle_doctor,
    "bridge": handle_bridge,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DesignKit CLI")
    parser.add_argument("--config", help="Path to a YAML config file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=3000)

    # export
    export_parser = subparsers.add_parser("export", help="Export the current design")
    export_parser.add_argument("formats", nargs="+", help=f"One or more of: {', '.join(ALL_FORMATS)}")
    export_parser.add_argument("-o", "--output", default=".", help="Output directory")
    export_parser.add_argument("--stdout", action="store_true", help="Print a single format")

    # import
    import_parser = subparsers.add_parser("import", help="Import an exported JSON file")
    import_parser.add_argument("file", help="Path to design-tokens.json")

    # doctor
    subparsers.add_parser("doctor", help="Check configuration, catalog and server")

    # bridge
    bridge_parser = subparsers.add_parser("bridge", help="Query a running server")
    bridge_parser.add_argument(
        "tool", choices=["config", "colors", "typography", "selections", "export", "token"]
    )
    bridge_parser.add_argument("arg", nargs="?", help="Format for 'export', dot-path for 'token'")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    config = get_config(args)
    logging.basicConfig(level=config.log_level)
    HANDLERS[args.command](config, args)


if __name__ == "__main__":
    main()
