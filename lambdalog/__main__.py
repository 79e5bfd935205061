#!/usr/bin/env python3
"""
Lambda Log Browser TUI - Browse the CloudWatch logs of AWS Lambda functions
"""
import argparse
import curses
import dataclasses
import logging
from pathlib import Path

from lambdalog.input_controller import CursesInputController
from lambdalog.output_controller import CursesOutputController
from lambdalog.sources.aws import FunctionLister, LogEventFetcher
from lambdalog.sources.cache import JsonFileCache, NullCache, default_cache_dir
from lambdalog.sources.profiles import DEFAULT_CONFIG_FILE, load_profiles
from lambdalog.viewmodels.app import Collaborators
from lambdalog.views.app import App

LOG_FILE = Path(__file__).parent / "lambdalog.log"

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Settings:
    """Options the browser was started with"""

    config_file: Path = DEFAULT_CONFIG_FILE
    cache_dir: Path | None = None
    log_file: Path = LOG_FILE


def _configure_logging(log_file: Path) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s[%(process)d]: %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.FileHandler(log_file, mode="a", encoding="utf-8"),
        ],
    )


def _init_app(stdscr: curses.window, settings: Settings) -> None:
    cache = NullCache() if settings.cache_dir is None else JsonFileCache(settings.cache_dir)
    collaborators = Collaborators(
        list_functions=FunctionLister(),
        fetch_events=LogEventFetcher(),
        cache=cache,
    )
    profiles = load_profiles(settings.config_file)

    logger.info("Starting browser with %d profiles", len(profiles))
    browser = App(
        CursesOutputController(stdscr),
        CursesInputController(stdscr),
        profiles,
        collaborators,
    )
    try:
        browser.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt")
    except BaseException as e:
        logger.exception("An error occurred")
        raise e
    finally:
        logger.info("Exiting browser")


def parse_settings(argv: list[str] | None = None) -> Settings:
    """Parse the command line into Settings"""
    parser = argparse.ArgumentParser(
        prog="lambdalog",
        description="Lambda Log Browser TUI - Browse the CloudWatch logs of Lambda functions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:
      %(prog)s
      %(prog)s -c ~/profiles.toml
      %(prog)s --no-cache

    Config file:
      [[profiles]]
      name = "dev"
      region = "us-east-1"

    Keys:
      ↑/↓, PgUp/PgDn   - Move through lists
      /                - Filter the list by keywords
      Enter            - Select / show event details
      Esc              - Go back
      c, Tab, ←/→      - Custom date range, switch bound, switch field
      q, Ctrl-C        - Quit
    """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_FILE,
        help="TOML file listing the AWS profiles (default: %(default)s)",
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help="Directory of the function list cache (default: $XDG_CACHE_HOME/lambdalog)",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Always fetch the function list instead of showing the cached one first",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=LOG_FILE,
        help="File to write the application log to (default: %(default)s)",
    )

    args = parser.parse_args(argv)

    if args.no_cache and args.cache_dir is not None:
        parser.error("--cache-dir cannot be used with --no-cache")
    if args.config.exists() and not args.config.is_file():
        parser.error(f"'{args.config}' is not a file")

    cache_dir = None if args.no_cache else (args.cache_dir or default_cache_dir())
    return Settings(config_file=args.config, cache_dir=cache_dir, log_file=args.log_file)


def main() -> None:
    """Main entry point"""
    settings = parse_settings()
    _configure_logging(settings.log_file)
    curses.wrapper(_init_app, settings)


if __name__ == "__main__":
    main()
