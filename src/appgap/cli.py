"""Command-line interface for AppGap."""

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants
from .core.errors import AnalysisError, to_error_response
from .core.identifier import extract_app_id
from .core.models import PrioritizedTheme, Theme
from .core.reducer import flatten_review
from .services.app_store_client import AppStoreService
from .services.analyzer import ReviewAnalyzer
from .services.llm import LLMServiceFactory
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def cmd_reviews(args):
    """Fetch reviews without analyzing them."""
    app_id = extract_app_id(args.input)
    store = AppStoreService(settings)
    report = store.fetch_reviews_report(app_id)

    print(f"Fetched {len(report.entries)} reviews for app {app_id}")
    print(f"Pages requested: {report.pages_requested} (stopped: {report.stop_reason.value})")
    if report.failed_pages:
        print(f"Failed pages: {', '.join(str(p) for p in report.failed_pages)}")

    for entry in report.entries[:args.limit]:
        print()
        print(flatten_review(entry)[:300])


def cmd_analyze(args):
    """Analyze command."""
    app_id = extract_app_id(args.input)
    analyzer = ReviewAnalyzer(AppStoreService(settings), LLMServiceFactory.create(settings))

    print(f"Analyzing app {app_id}...")
    result = analyzer.analyze(app_id)

    if args.out:
        export_to_json(prepare_export(result, app_id=app_id, report=result.fetch_report), args.out)
        print(f"Results exported to {args.out}")

    if args.pretty:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    if result.app_info and result.app_info.name:
        print(f"\n{result.app_info.name}")

    print(f"\nThemes ({len(result.themes)}):")
    for i, theme in enumerate((Theme.from_dict(t) for t in result.themes), 1):
        print(f"  {i}. {theme.title} ({theme.impact})")
        print(f"     {theme.summary}")
        if theme.quote:
            print(f"     \"{theme.quote}\"")
        if theme.feature:
            print(f"     Feature: {theme.feature}")

    if result.prioritized_themes:
        print("\nPrioritized:")
        for item in (PrioritizedTheme.from_dict(t) for t in result.prioritized_themes):
            print(f"  - [{item.impact}] {item.title}")


def cmd_serve(args):
    """Serve the HTTP API."""
    import uvicorn
    from .api import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return

    print("Launching AppGap UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AppGap - Unmet needs from App Store reviews")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze an app\'s reviews')
    analyze_parser.add_argument('input', help='App Store URL or numeric app id')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--pretty', action='store_true', help='Print the raw result as JSON')

    # Reviews command
    reviews_parser = subparsers.add_parser('reviews', help='Fetch reviews only')
    reviews_parser.add_argument('input', help='App Store URL or numeric app id')
    reviews_parser.add_argument('--limit', type=int, default=5, help='Number of reviews to print')

    # Serve command
    serve_parser = subparsers.add_parser('serve', help='Run the HTTP API')
    serve_parser.add_argument('--host', default='127.0.0.1')
    serve_parser.add_argument('--port', type=int, default=8000)

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    commands = {
        'analyze': cmd_analyze,
        'reviews': cmd_reviews,
        'serve': cmd_serve,
        'ui': cmd_ui,
    }
    try:
        commands[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except AnalysisError as e:
        body, status = to_error_response(e)
        print(f"Error ({status}): {body['error']}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)
