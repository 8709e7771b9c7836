from .context_service import ContextService
from .folder_scan_service import FolderScanService
from .heuristic_classification_service import HeuristicClassificationService
from .organize_service import OrganizeService
from .relocation_service import RelocationService

__all__ = [
    "ContextService",
    "FolderScanService",
    "HeuristicClassificationService",
    "OrganizeService",
    "RelocationService",
]
