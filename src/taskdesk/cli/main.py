# src/taskdesk/cli/main.py

"""
CLI entrypoint.

Initializes logging, starts the event loop on a background thread, builds
AppState, loads the task list once, then runs the console REPL on the main
thread until /exit, EOF or Ctrl+C.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier, run_console_loop
from ..core.loop_thread import BackgroundLoop, start_background_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

SHUTDOWN_TIMEOUT_SECONDS = 5.0


def _shutdown(state: AppState, background: BackgroundLoop) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        background.run(state.client.aclose(), timeout=SHUTDOWN_TIMEOUT_SECONDS)
    except Exception:
        logger.debug("HTTP client close failed.", exc_info=True)

    background.stop()
    background.join(timeout=SHUTDOWN_TIMEOUT_SECONDS)


def run(settings) -> None:
    background = start_background_loop()
    state = create_initial_state(settings=settings, notifier=ConsoleNotifier())
    try:
        try:
            background.run(state.task_list.load())
        except KeyboardInterrupt:
            logger.info("Interrupted during initial load, shutting down...")
            return
        run_console_loop(state, background)
    finally:
        _shutdown(state, background)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info("Starting %s...", settings.app_name)

    run(settings)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
