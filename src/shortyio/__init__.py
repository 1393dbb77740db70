"""
Shortyio Application Package.

A small desktop utility that turns a long URL into a short.io link. The
package is split into the GUI (`gui`), the link-creation core (`core`),
clipboard helpers (`utils`) and the settings file handling (`config`).

The GUI is not imported here so that `core` and `config` stay usable
without a Qt installation; the entry point lives in `shortyio.app`.
"""

__version__ = "0.1.0"
