from .errors import InvalidDestinationError, LLMRequestError, PlanParseError
from .extensions import EXTENSION_CATEGORIES, classify_extension
from .folder_signature import decide_folder_category, score_folder
from .models import (
    DEFAULT_CATEGORY,
    BatchPlan,
    Classification,
    DirectoryEntry,
    EntryKind,
    FolderSignature,
    Move,
    RunResult,
    RunResultKind,
)
from .plan_parsing import extract_json, parse_batch_plan

__all__ = [
    "DEFAULT_CATEGORY",
    "EXTENSION_CATEGORIES",
    "BatchPlan",
    "Classification",
    "DirectoryEntry",
    "EntryKind",
    "FolderSignature",
    "InvalidDestinationError",
    "LLMRequestError",
    "Move",
    "PlanParseError",
    "RunResult",
    "RunResultKind",
    "classify_extension",
    "decide_folder_category",
    "extract_json",
    "parse_batch_plan",
    "score_folder",
]
