# src/taskdesk/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import cmd_list
from ..cli.commands import registry as command_registry
from ..core.loop_thread import BackgroundLoop
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "taskdesk> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


class ConsoleNotifier:
    """Notifier port for the console: prints a flagged line the user cannot miss."""

    def notify(self, message: str) -> None:
        print(f"[{_ts_local()}] [!] {message}", flush=True)


def run_console_loop(
    state: AppState,
    background: BackgroundLoop,
    read_line: Callable[[str], str] = input,
) -> None:
    """
    Blocking REPL on the calling (main) thread.

    Commands run on `background`'s event loop; this thread only waits for them,
    so Ctrl+C interrupts both the prompt and a slow request.
    """
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")
    print(cmd_list(state, []))

    while True:
        try:
            user_input = read_line(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = background.run(command_registry.handle(state, user_input))
        except KeyboardInterrupt:
            # The request keeps running on the loop; there is no cancellation.
            logger.info("Console KeyboardInterrupt during a command, exiting.")
            print()
            break
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list available commands."
        print(reply)

    logger.info("Console connector finished.")
