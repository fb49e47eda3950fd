"""JSON export of a filter run.

Lets a region listing (after filtering) be saved and consumed by other
tools without re-querying the catalog.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import FilterResult


def export_filter_result_json(*, result: FilterResult, output_path: Path) -> Path:
    """Write `FilterResult` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = result.model_dump(mode="json")
    payload["excluded_count"] = result.excluded_count
    payload["empty_reason"] = result.empty_reason.value
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
