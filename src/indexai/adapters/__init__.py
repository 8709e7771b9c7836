from .llm_gemini import GeminiLLMAdapter
from .llm_mock import MockLLMAdapter
from .local_filesystem import LocalFileSystemAdapter
from .search_google import GoogleSearchAdapter

__all__ = [
    "GeminiLLMAdapter",
    "GoogleSearchAdapter",
    "LocalFileSystemAdapter",
    "MockLLMAdapter",
]
