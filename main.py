"""
Pet generator entry point.

Usage:
    python main.py             # text prompts
    python main.py --gui       # customtkinter window
    python main.py --verbose   # either of the above with debug logging
"""

import logging
import sys


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    if "--verbose" in args:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    if "--gui" in args:
        import gui_app
        gui_app.main()
    else:
        import interactive_generator
        interactive_generator.main()


if __name__ == "__main__":
    main()
