"""Basic usage examples for AppGap."""

from appgap import AppStoreService, LLMServiceFactory, ReviewAnalyzer, settings
from appgap.core.models import Theme
from appgap.core.reducer import flatten_review, reduce_reviews


def example_fetch_only():
    """Example: fetch reviews and see how much of them fits the prompt."""
    print("🔍 Fetching reviews for Yelp (284910350)")

    store = AppStoreService(settings)
    report = store.fetch_reviews_report("284910350")
    print(f"📊 Fetched {len(report.entries)} reviews from {report.pages_requested} pages "
          f"(stopped: {report.stop_reason.value})")

    packed = reduce_reviews(report.entries)
    print(f"📦 {len(packed)} reviews fit the prompt budget")
    if report.entries:
        print(flatten_review(report.entries[0]))


def example_full_analysis():
    """Example: full unmet-needs analysis from a store URL."""
    print("\n🔍 Analyzing https://apps.apple.com/us/app/yelp/id284910350")

    analyzer = ReviewAnalyzer(AppStoreService(settings), LLMServiceFactory.create(settings))
    result = analyzer.analyze("https://apps.apple.com/us/app/yelp/id284910350")

    for i, theme in enumerate((Theme.from_dict(t) for t in result.themes), 1):
        print(f"  {i}. {theme.title} ({theme.impact}): {theme.feature}")


if __name__ == "__main__":
    example_fetch_only()
    if settings.effective_openai_key:
        example_full_analysis()
    else:
        print("\nSet OPENAI_API_KEY to run the full analysis example.")
