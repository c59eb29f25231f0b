"""Services for AppGap."""

from .app_store_client import AppStoreService
from .llm import LLMServiceFactory, OpenAIService
from .analyzer import ReviewAnalyzer

__all__ = [
    "AppStoreService",
    "LLMServiceFactory",
    "OpenAIService",
    "ReviewAnalyzer",
]
