"""
Module entrypoint for `python -m zpl_designer`.

    python -m zpl_designer template1 "Title" "Subtitle" 1234546789
"""
import sys

from zpl_designer.app import main

if __name__ == "__main__":
    sys.exit(main())
