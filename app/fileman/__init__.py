"""fileman - Console file manager.

A thin interactive shell over listing, creating, deleting, renaming
and searching files and directories.
"""

__version__ = "0.1.0"
