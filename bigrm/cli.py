"""CLI entry point for the bigrm weather forecast tool."""

import argparse
import asyncio
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

import httpx

from bigrm.config.defaults import API_KEY_SIGNUP_URL, APP_NAME, APP_VERSION, COPYRIGHT
from bigrm.config.loader import default_config_path, load_config
from bigrm.config.schema import AppConfig
from bigrm.credentials.prompter import KeyPrompter
from bigrm.errors import BigrmError, MissingCredentialError, StorageAccessError
from bigrm.ingest.openweather_client import OpenWeatherClient, build_forecast_url
from bigrm.storage.credential_store import CredentialStore, resolve_api_key
from bigrm.storage.database import connect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliOptions:
    delete: bool = False
    help: bool = False
    version: bool = False
    unknown: tuple[str, ...] = ()


class _RaisingParser(argparse.ArgumentParser):
    """Reports parse failures as ArgumentError instead of exiting."""

    def error(self, message: str):
        raise argparse.ArgumentError(None, message)


def build_parser() -> argparse.ArgumentParser:
    parser = _RaisingParser(
        prog=APP_NAME,
        description="Print the latest OpenWeather forecast for the configured location.",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "-d", "--delete", action="store_true", help="Delete the stored API key"
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="Show this help message"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show version information"
    )
    return parser


def parse_args(argv: list[str]) -> CliOptions:
    """Parse flags without side effects; unrecognised tokens are collected, not fatal."""
    parser = build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError:
        return _parse_each(parser, argv)
    return CliOptions(
        delete=args.delete,
        help=args.help,
        version=args.version,
        unknown=tuple(unknown),
    )


def _parse_each(parser: argparse.ArgumentParser, argv: list[str]) -> CliOptions:
    # A flag carrying a value, e.g. -dx or --delete=yes, fails the whole parse.
    flags = {"delete": False, "help": False, "version": False}
    unknown: list[str] = []
    for token in argv:
        try:
            args, extra = parser.parse_known_args([token])
        except argparse.ArgumentError:
            unknown.append(token)
            continue
        unknown.extend(extra)
        for name in flags:
            flags[name] = flags[name] or getattr(args, name)
    return CliOptions(**flags, unknown=tuple(unknown))


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = load_config(default_config_path())
    except BigrmError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_code

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if argv:
            options = parse_args(argv)
            if options.unknown:
                print(
                    f"ERROR: unknown argument(s): {' '.join(options.unknown)}",
                    file=sys.stderr,
                )
                build_parser().print_help()
                return 1
            if options.delete:
                return _cmd_delete(config)
            if options.help:
                build_parser().print_help()
                return 0
            if options.version:
                return _cmd_version()
        return _cmd_forecast(config)
    except StorageAccessError as e:
        logger.debug("Key store failure", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        print(e.hint, file=sys.stderr)
        return e.exit_code
    except BigrmError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_code
    except httpx.HTTPError as e:
        logger.debug("Forecast request failed", exc_info=True)
        print(f"ERROR: forecast request failed: {e}", file=sys.stderr)
        return 1


def _open_store(config: AppConfig) -> CredentialStore:
    conn = connect(config.storage.db_path)
    return CredentialStore(
        conn,
        key_name=config.storage.key_name,
        db_path=Path(config.storage.db_path).expanduser(),
    )


def _cmd_delete(config: AppConfig) -> int:
    store = _open_store(config)
    try:
        if store.delete_key():
            print("API key removed from storage.")
        else:
            print("No stored API key found to remove.")
    finally:
        store.conn.close()
    return 0


def _cmd_version() -> int:
    print(f"{APP_NAME} version {APP_VERSION}")
    print(COPYRIGHT)
    return 0


def _resolve_key(config: AppConfig) -> str:
    env_key = os.environ.get(config.api.api_key_env, "").strip()
    if env_key:
        logger.info("Using API key from $%s", config.api.api_key_env)
        return env_key

    store = _open_store(config)
    try:
        prompter = KeyPrompter(mask_input=config.prompt.mask_input)
        api_key = resolve_api_key(store, prompter)
    finally:
        store.conn.close()

    if not api_key:
        raise MissingCredentialError(
            "Unable to proceed without an OpenWeather API key. Free or "
            "subscription API key options are available, request one here: "
            f"{API_KEY_SIGNUP_URL}"
        )
    return api_key


def _cmd_forecast(config: AppConfig) -> int:
    api_key = _resolve_key(config)
    url = build_forecast_url(
        config.api.base_url,
        config.location.latitude,
        config.location.longitude,
        api_key,
    )
    client = OpenWeatherClient(timeout=config.api.timeout_seconds)
    report = asyncio.run(client.fetch_report(url, config.location.name))
    print(report)
    return 0
