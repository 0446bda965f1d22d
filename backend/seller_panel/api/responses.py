"""
Shared response helpers for file downloads
"""
from fastapi.responses import StreamingResponse

from seller_panel.services.customer_analytics_service import export_filename


def csv_response(content: str, kind: str) -> StreamingResponse:
    """CSV download named <kind>_<YYYY-MM-DD>.csv"""
    return StreamingResponse(
        iter([content]),
        media_type="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={export_filename(kind)}"
        }
    )
