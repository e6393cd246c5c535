"""Storage and usage-search collaborators."""

from planguard.storage.filesystem import FileSystemStorage, LocationOutsideProjectError
from planguard.storage.repository import AssetsUsageService, SourceStorage, UsageSearchError
from planguard.storage.usage_index import TextScanUsageService

__all__ = [
    "AssetsUsageService",
    "FileSystemStorage",
    "LocationOutsideProjectError",
    "SourceStorage",
    "TextScanUsageService",
    "UsageSearchError",
]
