"""Data preparation for export."""

import json
from typing import Dict, Any, Optional

from ..core.models import AnalysisResult, FetchReport


def prepare_export(
    result: AnalysisResult,
    app_id: Optional[str] = None,
    report: Optional[FetchReport] = None,
) -> Dict[str, Any]:
    """Prepare an analysis result for JSON export."""
    export_data = result.to_dict()
    export_data["metadata"] = {
        "app_id": app_id,
        "export_timestamp": None,  # Will be set by caller
        "version": "0.1.0"
    }
    if report is not None:
        export_data["metadata"]["fetch"] = {
            "reviews": len(report.entries),
            "pages_requested": report.pages_requested,
            "failed_pages": report.failed_pages,
            "stop_reason": report.stop_reason.value,
        }
    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime

    # Add timestamp
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
