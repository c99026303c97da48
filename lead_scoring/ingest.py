"""
Lead file ingestion: CSV bytes -> Lead records
"""

import io
import logging
from typing import List

import pandas as pd

from .models.schemas import Lead
from .exceptions import InvalidLeadFileError
from .config.settings import REQUIRED_LEAD_FIELDS

logger = logging.getLogger(__name__)


def parse_leads_csv(content: bytes) -> List[Lead]:
    """
    Parse an uploaded CSV into leads.

    Args:
        content: Raw file bytes (UTF-8)

    Returns:
        Leads in file order; blank cells become empty strings

    Raises:
        InvalidLeadFileError: unreadable file, missing columns or no rows
    """
    try:
        df = pd.read_csv(io.BytesIO(content), dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError as e:
        raise InvalidLeadFileError("CSV file is empty or improperly formatted") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise InvalidLeadFileError(f"Could not parse CSV: {e}") from e

    # Allow case-insensitive, padded headers
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [col for col in REQUIRED_LEAD_FIELDS if col not in df.columns]
    if missing:
        raise InvalidLeadFileError(f"Missing required columns: {', '.join(missing)}")

    if df.empty:
        raise InvalidLeadFileError("CSV file is empty or improperly formatted")

    leads = [
        Lead(**{field: row[field] for field in REQUIRED_LEAD_FIELDS})
        for _, row in df.iterrows()
    ]
    logger.info("Parsed %d leads from upload", len(leads))
    return leads
