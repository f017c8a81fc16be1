"""Search-path resource scanner for directories and zip archives."""

from pathscan.models import Resource
from pathscan.models import RootErrorMode
from pathscan.operations import ResourceCollector
from pathscan.operations import scan_resources

__version__ = "0.1.0"

__all__ = [
    "Resource",
    "ResourceCollector",
    "RootErrorMode",
    "scan_resources",
]
