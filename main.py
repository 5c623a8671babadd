#!/usr/bin/env python3
"""hscroll - view a file with truncated lines and horizontal scrolling.

Usage:
    python main.py [filename]

Controls:
    C-v / M-v        Scroll a page up / down (keeps the goal column)
    C-x < / C-x >    Scroll left / right by a screen
    C-u N <cmd>      Numeric argument; C-u 0 C-x < jumps to end of line
    C-l              Recentre on the caret
    C-x t            Toggle truncation
    C-x C-n          Set goal column (C-u C-x C-n clears it)
    C-q or C-x C-c   Quit
"""

from hscroll.__main__ import main


if __name__ == "__main__":
    main()
