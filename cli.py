"""Command-line entry point for Diamonds."""

import sys

from common.config import Config
from common.errors import ConfigPathError, StoreParseError, StoreReadError
from common.logging_setup import get_logger, setup_logging
from common.paths import data_file_path, log_file_path
from store.collection import ProjectCollection
from store.storage import ProjectStore
from ui_service.app import run
from ui_service.clipboard import ClipboardSink
from ui_service.handlers import Session
from ui_service.render import Renderer
from ui_service.theme import theme_named

logger = get_logger(__name__)


def main() -> None:
    """Main entry point."""
    config = Config.from_env()

    try:
        data_path = data_file_path(config)
        log_file = log_file_path(config)
    except ConfigPathError as exc:
        print(f"Error getting data path: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        setup_logging(config.log_level, str(log_file) if log_file else None)
    except OSError as exc:
        print(f"Error opening log file: {exc}", file=sys.stderr)
        sys.exit(1)

    store = ProjectStore(data_path)
    try:
        projects = ProjectCollection.load(store)
    except (StoreReadError, StoreParseError) as exc:
        logger.error(f"Error loading projects: {exc}")
        print(f"Error loading projects: {exc}", file=sys.stderr)
        sys.exit(1)

    session = Session(projects=projects, clipboard=ClipboardSink())
    renderer = Renderer(theme_named(config.theme))
    sys.exit(run(session, renderer))


if __name__ == "__main__":
    main()
