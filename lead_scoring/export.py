"""
Result export: JSON preview/summary and flat CSV rows
"""

import csv
import io
from typing import Any, Dict, List

import pandas as pd

from .models.schemas import BatchResult, ScoredLead
from .config.settings import SCORING_CONFIG

CSV_COLUMNS = [
    "name", "role", "company", "industry", "location", "intent", "score", "reasoning",
]


def scored_lead_to_dict(lead: ScoredLead) -> Dict[str, Any]:
    """JSON-ready record with camelCase breakdown keys"""
    return lead.model_dump(mode="json", by_alias=True)


def batch_to_dict(batch: BatchResult, preview: int = SCORING_CONFIG["preview_size"]) -> Dict[str, Any]:
    """Response body for a finished scoring run"""
    return {
        "message": "Scoring completed successfully",
        "summary": batch.summary.model_dump(by_alias=True),
        "preview": [scored_lead_to_dict(r) for r in batch.results[:preview]],
    }


def results_to_csv(results: List[ScoredLead]) -> str:
    """
    Flatten scored leads to CSV.

    Text fields are always quoted with embedded quotes doubled; the
    numeric score is left unquoted. The header row is unquoted.
    """
    rows = [
        {
            "name": r.name,
            "role": r.role,
            "company": r.company,
            "industry": r.industry,
            "location": r.location,
            "intent": r.intent.value,
            "score": r.score,
            "reasoning": r.reasoning or "",
        }
        for r in results
    ]
    df = pd.DataFrame(rows, columns=CSV_COLUMNS)

    stream = io.StringIO()
    stream.write(",".join(CSV_COLUMNS) + "\n")
    df.to_csv(
        stream,
        index=False,
        header=False,
        quoting=csv.QUOTE_NONNUMERIC,
        lineterminator="\n",
    )
    return stream.getvalue()
