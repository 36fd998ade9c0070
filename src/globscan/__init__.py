"""File discovery for build automation.

This package provides the traversal state, predicates and walker used to enumerate
files and directories that match user-supplied inclusion and exclusion rules, in a
stable depth-first order.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for programmatic use
try:
    __version__ = version("globscan")
except PackageNotFoundError:
    __version__ = "unknown"
