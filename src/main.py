"""Main entry point for the terminal task organizer.

Seeds the Personal / Work / Family categories and starts the menu loop.
Nothing is saved: the store lives only as long as the process.
"""
import logging
import os
from board import CategoryStore
from cli import CLI

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    """Configure the root logger from ORGANIZER_LOG_LEVEL / ORGANIZER_LOG_FILE."""
    level = getattr(logging, os.getenv("ORGANIZER_LOG_LEVEL", "WARNING").upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT,
                        filename=os.getenv("ORGANIZER_LOG_FILE") or None)


def main():
    configure_logging()
    cli = CLI(CategoryStore())
    cli.run()

if __name__ == "__main__":
    main()
