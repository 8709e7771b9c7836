from .filesystem_port import FileSystemPort
from .llm_port import LLMPort
from .search_port import SearchPort

__all__ = ["FileSystemPort", "LLMPort", "SearchPort"]
