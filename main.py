import sys

from shortyio.app import main


if __name__ == '__main__':
    # The window's Escape shortcut and the close button both end the event
    # loop normally, so the exit code is whatever Qt reports (0).
    sys.exit(main())
