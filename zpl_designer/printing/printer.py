"""
printing/printer.py - Print jobs and printer control commands over a backend.

A job is plain ZPL text encoded as UTF-8. Labels are sent as complete
^XA ... ^XZ documents; control commands are tilde commands the printer acts
on immediately, even in the middle of a queue.
"""
from __future__ import annotations

import logging
from typing import Union

from ..core.label import Label
from .backends import BaseBackend, make_backend
from .exceptions import PrintJobError, map_exception


log = logging.getLogger(__name__)

CALIBRATE_CMD = "~JC"       # measure label length and gap
CANCEL_ALL_CMD = "~JA"      # drop every queued format
CONFIG_LABEL_CMD = "~WC"    # print the configuration label

CONTROL_COMMANDS = {
    "calibrate": CALIBRATE_CMD,
    "cancel": CANCEL_ALL_CMD,
    "config": CONFIG_LABEL_CMD,
}


def build_job(document: Union[str, Label], copies: int = 1) -> bytes:
    """Encode *copies* repetitions of a ZPL document, one per line."""
    zpl = document.to_zpl() if isinstance(document, Label) else document
    if not zpl:
        raise PrintJobError("nothing to print")
    if copies < 1:
        raise PrintJobError(f"copies must be >= 1, got {copies}")
    return ("\n".join([zpl] * copies) + "\n").encode("utf-8")


class ZplPrinter:
    """One printer reachable through a backend."""

    def __init__(self, backend: BaseBackend):
        self.backend = backend

    @classmethod
    def from_config(cls, cfg: dict) -> "ZplPrinter":
        return cls(make_backend(cfg))

    def _send(self, data: bytes) -> None:
        target = self.backend.describe()
        log.debug("Sending %d bytes to %s", len(data), target)
        try:
            self.backend.send(data)
        except Exception as e:
            err = map_exception(e, target)
            if err is e:
                raise
            raise err from e
        log.info("Sent %d bytes to %s", len(data), target)

    def print_label(self, document: Union[str, Label], copies: int = 1) -> None:
        try:
            data = build_job(document, copies)
        except UnicodeError as e:
            raise map_exception(e, self.backend.describe()) from e
        self._send(data)

    def control(self, action: str) -> None:
        """Send one of ``CONTROL_COMMANDS`` by name."""
        try:
            command = CONTROL_COMMANDS[action]
        except KeyError:
            raise PrintJobError(
                f"unknown printer action {action!r}", self.backend.describe()
            ) from None
        self._send((command + "\n").encode("ascii"))

    def calibrate(self) -> None:
        self.control("calibrate")

    def cancel_all(self) -> None:
        self.control("cancel")

    def print_configuration(self) -> None:
        self.control("config")
