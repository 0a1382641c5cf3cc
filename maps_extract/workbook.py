"""
Workbook Output

Maps enriched records onto the fixed spreadsheet schema and serializes it
as an .xlsx file.
"""

import time
from io import BytesIO
from typing import Any, Dict, List, Optional

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from .config import WORKBOOK_COLUMNS, SHEET_NAME, FILENAME_PREFIX
from .models import PlaceDetail


def _blank(value: Any) -> Any:
    """Render a missing value as an empty cell; 0 and False are kept."""
    return "" if value is None else value


def format_open_now(open_now: Optional[bool]) -> str:
    if open_now is None:
        return ""
    return "Yes" if open_now else "No"


def record_to_row(record: PlaceDetail) -> Dict[str, Any]:
    """
    Map one enriched record to cell values keyed by column key.

    Args:
        record: Enriched place

    Returns:
        Dictionary with one entry per WORKBOOK_COLUMNS key
    """
    return {
        "name": _blank(record.name),
        "phone": record.phone if record.phone is not None else (record.international_phone or ""),
        "address": _blank(record.address),
        "latitude": _blank(record.latitude),
        "longitude": _blank(record.longitude),
        "rating": _blank(record.rating),
        "reviews": _blank(record.review_count),
        "website": _blank(record.website),
        "status": _blank(record.business_status),
        "open_now": format_open_now(record.open_now),
        "types": ", ".join(record.types) if record.types else "",
        "place_id": record.place_id,
    }


def build_workbook(records: List[PlaceDetail]) -> Workbook:
    """
    Build a single-sheet workbook with a bold header row.

    Records are written in the order given.
    """
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = SHEET_NAME

    worksheet.append([header for header, _, _ in WORKBOOK_COLUMNS])
    for cell in worksheet[1]:
        cell.font = Font(bold=True)

    for index, (_, _, width) in enumerate(WORKBOOK_COLUMNS, start=1):
        worksheet.column_dimensions[get_column_letter(index)].width = width

    for record in records:
        row = record_to_row(record)
        worksheet.append([row[key] for _, key, _ in WORKBOOK_COLUMNS])

    return workbook


def workbook_to_bytes(workbook: Workbook) -> bytes:
    """Serialize a workbook to .xlsx bytes."""
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def generate_filename(now: Optional[float] = None) -> str:
    """Build a download filename from the current time (epoch milliseconds)."""
    if now is None:
        now = time.time()
    return f"{FILENAME_PREFIX}-{int(now * 1000)}.xlsx"
