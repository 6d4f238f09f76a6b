"""riokeys CLI: recent runs for a character, details for a single run."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from riokeys.codes import Region, Server

logger = logging.getLogger(__name__)


def main():
    """Main CLI entry point for riokeys commands."""
    try:
        riokeys_version = get_version("riokeys")
    except PackageNotFoundError:
        riokeys_version = "dev"

    parser = argparse.ArgumentParser(
        prog="riokeys",
        description="WoW CLI for the Raider.io API"
    )
    parser.add_argument("--version", action="version", version=f"riokeys {riokeys_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log cache and HTTP activity to stderr."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # keys command
    keys_parser = subparsers.add_parser(
        "keys",
        help="List the recent keystone runs of a character",
        parents=[parent_parser]
    )
    keys_parser.add_argument(
        "-c", "--character-name",
        required=True,
        help="Character name"
    )
    keys_parser.add_argument(
        "-r", "--region",
        required=True,
        choices=[region.value for region in Region],
        help="Character region"
    )
    keys_parser.add_argument(
        "-s", "--server",
        required=True,
        choices=[server.cli_name for server in Server],
        help="Character realm"
    )

    # key command
    key_parser = subparsers.add_parser(
        "key",
        help="Show the roster of a single keystone run (cached)",
        parents=[parent_parser]
    )
    key_parser.add_argument(
        "-i", "--id",
        dest="run_id",
        type=int,
        required=True,
        help="Keystone run id"
    )
    key_parser.add_argument(
        "--cache-path",
        type=Path,
        default=None,
        help="Path to the run cache file (defaults to RIOKEYS_CACHE_PATH or cache.json)"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Lazy imports: argument errors and --help stay fast
    from riokeys.config import load_settings
    from riokeys.errors import RioError
    from riokeys.logging_utils import configure_logging
    from riokeys._internal.http import RemoteClient

    try:
        settings = load_settings(
            cache_path=getattr(args, "cache_path", None),
            log_level="DEBUG" if args.verbose else None,
        )
    except ValueError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(settings.log_level)
    logger.debug("Effective settings: %s", settings.as_dict())

    if args.command == "keys":
        from riokeys.api import recent_runs

        client = RemoteClient()
        try:
            report = recent_runs(
                args.character_name,
                Region(args.region),
                Server.from_cli(args.server),
                client=client,
                settings=settings,
            )
            if not args.quiet:
                print(report, end="")
        except RioError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
        finally:
            client.close()
    elif args.command == "key":
        from riokeys.api import lookup_run
        from riokeys._internal.cache_store import CacheStore

        client = RemoteClient()
        try:
            store = CacheStore(settings.cache_path, pretty=settings.pretty_cache)
            result = lookup_run(args.run_id, store=store, client=client, settings=settings)
            if not args.quiet:
                print(result.report, end="")
            if not result.persisted:
                print(f"Warning: run {args.run_id} was not cached: {result.persist_error}", file=sys.stderr)
        except RioError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
        finally:
            client.close()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
