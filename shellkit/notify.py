"""Desktop notifications through terminal-notifier (macOS Notification Center)."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import List, NoReturn, Optional

from shellkit.diagnostics import error
from shellkit.exceptions import InvalidArgument, NotificationError

_LOGGER = logging.getLogger("shellkit.notify")

_NOTIFIER_ENV = "SHELLKIT_NOTIFIER"
_DEFAULT_NOTIFIER = os.path.join(
    "~", "bin", "terminal-notifier.app", "Contents", "MacOS", "terminal-notifier"
)
DEFAULT_TITLE = "notify"


def notifier_path() -> str:
    """Return the notifier executable, honouring ``SHELLKIT_NOTIFIER``."""

    raw = os.getenv(_NOTIFIER_ENV, "").strip() or _DEFAULT_NOTIFIER
    return os.path.expanduser(raw)


def build_command(message: str, title: Optional[str] = None) -> List[str]:
    return [notifier_path(), "-title", title or DEFAULT_TITLE, "-message", message]


def notify(message: str, title: Optional[str] = None) -> None:
    """Show *message* in the Notification Center under *title*.

    Raises:
        NotificationError: If the notifier is missing or exits with a failure.
    """

    if not message:
        raise InvalidArgument("usage: notify message | notify title message")

    command = build_command(message, title)
    _LOGGER.debug("running notifier: %s", command[0])
    try:
        subprocess.run(command, check=True, capture_output=True)
    except FileNotFoundError as exc:
        raise NotificationError(f"notifier not found: {command[0]}") from exc
    except OSError as exc:
        raise NotificationError(f"notifier could not be run: {exc}") from exc
    except subprocess.CalledProcessError as exc:
        raise NotificationError(f"notifier exited with status {exc.returncode}") from exc


def notify_error(message: str, title: Optional[str] = None) -> NoReturn:
    """Notify with *message*, then report it through :func:`error` and exit."""

    try:
        notify(message, title)
    except NotificationError as exc:
        _LOGGER.warning("Notification failed: %s", exc)
    error(message)


__all__ = ["DEFAULT_TITLE", "build_command", "notifier_path", "notify", "notify_error"]
