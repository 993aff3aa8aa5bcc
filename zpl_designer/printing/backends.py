"""
printing/backends.py - Byte sinks that deliver a ZPL document to a printer.

Zebra printers take raw ZPL on any of their ports without a driver, so a
backend only has to open the link, write the bytes and close it again:
  network: TCP to the raw port (9100)
  serial:  RS-232 / USB-serial adapter via pyserial
  usb:     the printer-class bulk OUT endpoint via pyusb
  dry_run: keep the bytes in memory
"""
from __future__ import annotations

import logging
import socket
from typing import List, Optional

import serial
import usb.core
import usb.util

from .exceptions import PrinterConfigError, PrinterConnectionError


log = logging.getLogger(__name__)

ZPL_RAW_PORT = 9100
ZEBRA_USB_VENDOR_ID = 0x0A5F

INTERFACES = ("network", "serial", "usb", "dry_run")


class BaseBackend:
    def describe(self) -> str:
        """Short name of the printer for messages, e.g. ``host:9100``."""
        return type(self).__name__

    def send(self, data: bytes) -> None:
        raise NotImplementedError


class NetworkBackend(BaseBackend):
    def __init__(self, host: str, port: int = ZPL_RAW_PORT, timeout: float = 5.0):
        self.host = host
        self.port = int(port)
        self.timeout = float(timeout)

    def describe(self) -> str:
        return f"{self.host}:{self.port}"

    def send(self, data: bytes) -> None:
        # one connection per job; the printer starts on the bytes, no reply
        with socket.create_connection((self.host, self.port), timeout=self.timeout) as conn:
            conn.sendall(data)


class SerialBackend(BaseBackend):
    def __init__(self, device: str, baudrate: int = 9600, timeout: float = 2.0):
        self.device = device
        self.baudrate = int(baudrate)
        self.timeout = float(timeout)

    def describe(self) -> str:
        return f"{self.device}@{self.baudrate}"

    def send(self, data: bytes) -> None:
        with serial.Serial(
            self.device, self.baudrate, timeout=self.timeout, write_timeout=self.timeout
        ) as port:
            port.write(data)
            port.flush()


class USBBackend(BaseBackend):
    """
    Writes to the first bulk OUT endpoint of a USB printer.

    The device is looked up on every send so a printer that was unplugged
    and plugged back in keeps working. On Linux the usblp kernel driver
    claims Zebra printers and is detached first.
    """

    CHUNK = 16384

    def __init__(
        self,
        product_id: int,
        vendor_id: int = ZEBRA_USB_VENDOR_ID,
        endpoint: Optional[int] = None,
    ):
        self.vendor_id = int(vendor_id)
        self.product_id = int(product_id)
        self.endpoint = endpoint

    def describe(self) -> str:
        return f"usb:{self.vendor_id:04x}:{self.product_id:04x}"

    def _out_endpoint(self, dev):
        dev.set_configuration()
        intf = dev.get_active_configuration()[(0, 0)]
        try:
            if dev.is_kernel_driver_active(intf.bInterfaceNumber):
                dev.detach_kernel_driver(intf.bInterfaceNumber)
        except (NotImplementedError, usb.core.USBError) as e:
            log.debug("Kernel driver left attached: %s", e)

        if self.endpoint is not None:
            return usb.util.find_descriptor(intf, bEndpointAddress=self.endpoint)
        return usb.util.find_descriptor(
            intf,
            custom_match=lambda ep: usb.util.endpoint_direction(ep.bEndpointAddress) == usb.util.ENDPOINT_OUT,
        )

    def send(self, data: bytes) -> None:
        dev = usb.core.find(idVendor=self.vendor_id, idProduct=self.product_id)
        if dev is None:
            raise PrinterConnectionError("USB printer not connected", self.describe())
        try:
            ep = self._out_endpoint(dev)
            if ep is None:
                raise PrinterConnectionError("printer has no bulk OUT endpoint", self.describe())
            for start in range(0, len(data), self.CHUNK):
                ep.write(data[start:start + self.CHUNK])
        finally:
            usb.util.dispose_resources(dev)


class DryRunBackend(BaseBackend):
    """Collects everything sent to it; no hardware involved."""

    def __init__(self):
        self.sent_chunks: List[bytes] = []

    def describe(self) -> str:
        return "dry-run"

    def send(self, data: bytes) -> None:
        self.sent_chunks.append(bytes(data))

    @property
    def total_bytes(self) -> int:
        return sum(len(c) for c in self.sent_chunks)

    @property
    def text(self) -> str:
        return b"".join(self.sent_chunks).decode("utf-8")


def _int_or_hex(value) -> int:
    # "0x0a5f" and "2655" both come in from the command line
    return int(value, 0) if isinstance(value, str) else int(value)


def make_backend(cfg: dict) -> BaseBackend:
    """
    Build a backend from printer settings.

    Keys: ``interface`` (default ``network``), ``host``, ``port``, ``timeout``,
    ``device``, ``baudrate``, ``usb_vid``, ``usb_pid``, ``usb_endpoint``.
    """
    iface = (cfg.get("interface") or "network").lower()
    if iface == "network":
        if not cfg.get("host"):
            raise PrinterConfigError("network printing needs a host")
        return NetworkBackend(
            cfg["host"],
            int(cfg.get("port") or ZPL_RAW_PORT),
            float(cfg.get("timeout") or 5.0),
        )
    if iface == "serial":
        if not cfg.get("device"):
            raise PrinterConfigError("serial printing needs a device, e.g. /dev/ttyUSB0")
        return SerialBackend(cfg["device"], int(cfg.get("baudrate") or 9600))
    if iface == "usb":
        if not cfg.get("usb_pid"):
            raise PrinterConfigError("USB printing needs the printer's product id")
        endpoint = cfg.get("usb_endpoint")
        return USBBackend(
            _int_or_hex(cfg["usb_pid"]),
            _int_or_hex(cfg.get("usb_vid") or ZEBRA_USB_VENDOR_ID),
            _int_or_hex(endpoint) if endpoint is not None else None,
        )
    if iface == "dry_run":
        return DryRunBackend()
    raise PrinterConfigError(f"unknown interface {iface!r}; use one of {', '.join(INTERFACES)}")
