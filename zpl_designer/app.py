"""
Command-line entry point: render one of the built-in templates to ZPL and
write it out or send it to a printer, or send the printer a control
command.

Examples:
    python -m zpl_designer template1 "Title" "Subtitle" 1234546789 --width 2 --height 1
    python -m zpl_designer template2 "Title" "Sub" "1200 kg" 1234546789 --send --host 10.0.0.7
    python -m zpl_designer control calibrate --interface serial --device /dev/ttyUSB0
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .core.label import Label, LabelSize
from .core.templates import template1, template2
from .printing.backends import INTERFACES, ZPL_RAW_PORT
from .printing.exceptions import PrintError
from .printing.printer import CONTROL_COMMANDS, ZplPrinter


log = logging.getLogger(__name__)

HOST_ENV_VAR = "ZPL_PRINTER_HOST"


def _printer_options() -> argparse.ArgumentParser:
    opts = argparse.ArgumentParser(add_help=False)
    g = opts.add_argument_group("printer")
    g.add_argument("--interface", choices=INTERFACES, default=None, help="transport (default network)")
    g.add_argument("--host", default=os.environ.get(HOST_ENV_VAR), help=f"printer host (default ${HOST_ENV_VAR})")
    g.add_argument("--port", type=int, default=None, help=f"raw TCP port (default {ZPL_RAW_PORT})")
    g.add_argument("--device", help="serial device, e.g. /dev/ttyUSB0")
    g.add_argument("--baudrate", type=int, default=None)
    g.add_argument("--usb-vid", help="USB vendor id (default Zebra, 0x0a5f)")
    g.add_argument("--usb-pid", help="USB product id")
    g.add_argument("--dry-run", action="store_true", help="go through sending without a printer")
    return opts


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="zpl-designer", description="Generate ZPL labels from templates")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    ap.add_argument("-q", "--quiet", action="store_true", help="errors only")

    printer = _printer_options()
    common = argparse.ArgumentParser(add_help=False, parents=[printer])
    common.add_argument("--width", type=float, default=None, help="label width in inches")
    common.add_argument("--height", type=float, default=None, help="label height in inches")
    common.add_argument(
        "--dpi", type=int, default=LabelSize.DPMM_8,
        help="printhead density in dots per inch (152, 203, 305, 610)",
    )
    common.add_argument("-o", "--output", type=Path, help="write ZPL to this file instead of stdout")
    common.add_argument(
        "--no-document", dest="document", action="store_false",
        help="emit component instructions only, without ^XA/^PW/^LL/^XZ",
    )
    common.add_argument("--send", action="store_true", help="send the label to a printer")
    common.add_argument("-c", "--copies", type=int, default=1)

    sub = ap.add_subparsers(dest="command", required=True)

    t1 = sub.add_parser("template1", parents=[common], help="title, subtitle and barcode (2x1 in)")
    t1.add_argument("title")
    t1.add_argument("subtitle")
    t1.add_argument("barcode")
    t1.add_argument("--center", action="store_true", help="center the texts")
    t1.set_defaults(default_size=(2, 1))

    t2 = sub.add_parser("template2", parents=[common], help="title, subtitle, info and barcode (3x2 in)")
    t2.add_argument("title")
    t2.add_argument("subtitle")
    t2.add_argument("info")
    t2.add_argument("barcode")
    t2.set_defaults(default_size=(3, 2))

    ctl = sub.add_parser("control", parents=[printer], help="send a control command to the printer")
    ctl.add_argument("action", choices=sorted(CONTROL_COMMANDS))

    return ap


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_label(args: argparse.Namespace) -> Label:
    width, height = args.default_size
    if args.width is not None:
        width = args.width
    if args.height is not None:
        height = args.height
    return Label(width, height, args.dpi)


def render(args: argparse.Namespace, label: Label) -> str:
    if args.command == "template1":
        code = template1(label, args.center, args.title, args.subtitle, args.barcode)
    else:
        code = template2(label, args.title, args.subtitle, args.info, args.barcode)
    if not code:
        return ""
    return label.to_zpl() if args.document else code


def printer_config(args: argparse.Namespace) -> dict:
    """Backend settings from the command line; unset options are left out."""
    if args.dry_run:
        return {"interface": "dry_run"}
    cfg = {
        "interface": args.interface,
        "host": args.host,
        "port": args.port,
        "device": args.device,
        "baudrate": args.baudrate,
        "usb_vid": args.usb_vid,
        "usb_pid": args.usb_pid,
    }
    return {k: v for k, v in cfg.items() if v is not None}


def run_printer(args: argparse.Namespace, job) -> int:
    """Build the printer from *args* and call ``job(printer)``; 1 on failure."""
    try:
        printer = ZplPrinter.from_config(printer_config(args))
        job(printer)
    except PrintError as e:
        log.debug("Print failure", exc_info=True)
        print(f"Print failed: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    if args.command == "control":
        return run_printer(args, lambda p: p.control(args.action))

    label = build_label(args)
    zpl = render(args, label)
    if not zpl:
        print("Label has no printable area; check --width/--height/--dpi.", file=sys.stderr)
        return 2

    if args.output:
        args.output.write_text(zpl + "\n", encoding="utf-8")
        log.info("Wrote %s", args.output)
    elif not args.send:
        print(zpl)

    if args.send:
        return run_printer(args, lambda p: p.print_label(zpl, args.copies))
    return 0
