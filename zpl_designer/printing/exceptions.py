"""
printing/exceptions.py - What can go wrong between a finished ZPL document
and the printhead.

Every error carries the printer it was talking to (``target``, e.g.
``"10.0.0.7:9100"`` or ``"/dev/ttyUSB0"``) so the CLI can say which device
failed. Nothing here imports a transport library.
"""
from __future__ import annotations

from typing import Optional


class PrintError(Exception):
    """Sending ZPL to a printer failed."""

    def __init__(self, message: str, target: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        if self.target:
            return f"{self.target}: {self.message}"
        return self.message


class PrinterConnectionError(PrintError):
    """The printer could not be reached, or dropped the link mid-job."""


class PrinterConfigError(PrintError):
    """The printer settings are incomplete or name an unknown transport."""


class PrintJobError(PrintError):
    """The link was up but the document could not be delivered."""


def _describe_os_error(exc: OSError) -> str:
    if isinstance(exc, ConnectionRefusedError):
        return "connection refused; is raw ZPL printing enabled on port 9100?"
    if isinstance(exc, (ConnectionResetError, BrokenPipeError)):
        return "printer closed the connection before the label was sent"
    if isinstance(exc, TimeoutError):
        return "no answer from printer; check power and cabling"
    if isinstance(exc, FileNotFoundError):
        return f"device not found ({exc.filename or exc})"
    if isinstance(exc, PermissionError):
        return f"no permission to open the device ({exc.filename or exc})"
    return f"link error: {exc}"


def map_exception(exc: BaseException, target: Optional[str] = None) -> PrintError:
    """
    Translate a transport or encoding failure into a ``PrintError``.

    The original exception stays reachable through ``__cause__``. A
    ``PrintError`` passes through unchanged, only gaining *target* if it
    had none.
    """
    if isinstance(exc, PrintError):
        if exc.target is None:
            exc.target = target
        return exc

    # pyserial's SerialException and pyusb's USBError are both OSError
    if isinstance(exc, OSError):
        err: PrintError = PrinterConnectionError(_describe_os_error(exc), target)
    elif isinstance(exc, UnicodeError):
        err = PrintJobError(f"label text could not be encoded: {exc}", target)
    elif isinstance(exc, (ValueError, TypeError, KeyError)):
        err = PrinterConfigError(f"bad printer setting: {exc}", target)
    else:
        err = PrintJobError(str(exc) or type(exc).__name__, target)
    err.__cause__ = exc
    return err
