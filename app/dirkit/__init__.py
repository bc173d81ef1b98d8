"""dirkit - filesystem inspection and traversal toolkit.

Models files and folders as attribute snapshots, walks directory trees
with per-entry failure tracking, and builds name search and bulk copy
on top of the walk.
"""

__version__ = "0.1.0"
