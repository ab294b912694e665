"""quotebox: local quote collection with server synchronization.

Expose subpackages for easier imports, e.g. `from quotebox import storage, sync`.
"""

from . import storage, sync, transfer  # re-export packages

__all__ = ["storage", "sync", "transfer"]
