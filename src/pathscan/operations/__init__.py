"""High-level operations for pathscan."""

from pathscan.operations.locate import ResourceLoader
from pathscan.operations.locate import RootLocator
from pathscan.operations.locate import SearchPathLoader
from pathscan.operations.scan import ResourceCollector
from pathscan.operations.scan import scan_resources
from pathscan.operations.scan import to_scan_root

__all__ = [
    "ResourceCollector",
    "ResourceLoader",
    "RootLocator",
    "SearchPathLoader",
    "scan_resources",
    "to_scan_root",
]
