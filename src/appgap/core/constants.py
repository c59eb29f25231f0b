"""Constants and configuration values for AppGap."""

# Review Feed Constants
class FeedConstants:
    """Constants related to the App Store customer review feed."""

    RSS_PAGES = 10  # Apple serves at most 10 pages per app
    RSS_DELAY_SECONDS = 0.1  # pause between page requests
    MAX_REVIEWS_TOTAL = 500  # stop fetching once this many reviews are collected

# Token Budget Constants
class BudgetConstants:
    """Constants for packing review text into the prompt."""

    MAX_REVIEWS = 100  # reviews considered for the prompt
    MAX_TOKENS_PER_REVIEW = 1000  # estimated tokens per review block
    MAX_TOTAL_TOKENS = 6000  # estimated tokens for all review blocks
    CHARS_PER_TOKEN = 4  # rough characters-per-token heuristic
    TRUNCATION_MARKER = "…"

# Prompt Constants
class PromptConstants:
    """Constants for LLM prompts and decoding."""

    DEFAULT_MODEL = "gpt-4o-mini"
    TEMPERATURE = 0.7
    MAX_OUTPUT_TOKENS = 1000

# Error Handling Constants
class ErrorConstants:
    """Constants for error handling and user-facing messages."""

    REQUEST_TIMEOUT = 60  # timeout for completion requests
    RAW_RESPONSE_LOG_CHARS = 500  # chars of an unparsable response to log

    MISSING_INPUT = "Missing or invalid input. Please provide an App Store URL or App Store ID."
    INVALID_INPUT = "Invalid input. Please provide a valid App Store URL or App Store ID."
    MISSING_API_KEY = "OpenAI API key is not configured"
    PARSE_FAILED = "Failed to parse analysis response"
    ANALYSIS_FAILED = "Failed to analyze reviews"
    SERVICE_UNAVAILABLE = "Analysis service is unavailable. Please try again later."
    UNCLASSIFIED = "Failed to process request"

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
