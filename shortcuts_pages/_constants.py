"""Common literal values used across shortcuts_pages.

These constants keep marker comments and fence labels centralized so the
loader, the README updater, and tests can import the same values without
drifting. Intended for internal use within the shortcuts_pages package.

Examples
--------
>>> from shortcuts_pages import _constants
>>> _constants.TOC_START_MARKER
'<!-- toc -->'
>>> "output" in _constants.OUTPUT_LANGUAGES
True
"""

TOC_START_MARKER = "<!-- toc -->"
TOC_END_MARKER = "<!-- tocstop -->"
OUTPUT_LANGUAGES = frozenset({"output", "text", "console"})
