"""AppGap - unmet user needs from App Store reviews."""

__version__ = "0.1.0"
__author__ = "AppGap Team"

from .core.models import *
from .core.config import settings
from .core.errors import AnalysisError, ErrorKind
from .services.app_store_client import AppStoreService
from .services.analyzer import ReviewAnalyzer
from .services.llm import LLMServiceFactory

__all__ = [
    "settings",
    "AnalysisError",
    "ErrorKind",
    "AppStoreService",
    "ReviewAnalyzer",
    "LLMServiceFactory",
]
