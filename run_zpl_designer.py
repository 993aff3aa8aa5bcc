#!/usr/bin/env python
"""
Launcher script for ZPL Designer.

Usage from repo root:
    python run_zpl_designer.py template2 "Title" "Subtitle" "1200 kg" 1234546789

Alternative:
    python -m zpl_designer ...
"""
import sys

from zpl_designer.app import main

if __name__ == "__main__":
    sys.exit(main())
