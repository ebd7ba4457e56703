"""Entrypoint for the region highlighter demo."""

from __future__ import annotations

import logging

import config


def _configure_logging() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)


def run() -> None:
    _configure_logging()
    from game import main as game_main

    game_main()


if __name__ == "__main__":
    run()
