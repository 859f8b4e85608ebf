# sales/visualization/excel_exporter.py

from datetime import date
from io import BytesIO
from typing import Iterable

import pandas as pd
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from sales.domain.entities import SalesRecord
from sales_inquiry.config import settings

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# (record field, header label, column width)
COLUMNS = [
    ("invoice_no", "Invoice No", 15),
    ("customer_code", "Customer Code", 15),
    ("customer_name", "Customer Name", 30),
    ("goods_code", "Goods Code", 15),
    ("goods_name", "Goods Name", 30),
    ("sales_qty", "Sales Qty", 12),
    ("sales_amount", "Sales Amount", 15),
]

HEADER_FILL = PatternFill(fill_type="solid", start_color="FF4472C4", end_color="FF4472C4")
HEADER_FONT = Font(bold=True, color="FFFFFFFF")


def export_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"SalesData_{today.isoformat()}.xlsx"


def export_sales_to_excel(rows: Iterable[SalesRecord], sheet_name: str | None = None) -> bytes:
    """
    Writes the records to an in-memory .xlsx workbook and returns its bytes.

    One styled header row, then one row per record in the order given.
    Quantities and amounts are written as numbers; an empty input gives a
    header-only sheet.
    """
    # Excel caps sheet names at 31 characters
    sheet_name = (sheet_name or settings.EXPORT_SHEET_NAME)[:31]
    fields = [f for f, _, _ in COLUMNS]

    df = pd.DataFrame([r.to_dict() for r in rows], columns=fields)
    df = df.rename(columns={f: label for f, label, _ in COLUMNS})

    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        worksheet = writer.sheets[sheet_name]
        for idx, (_, _, width) in enumerate(COLUMNS, start=1):
            cell = worksheet.cell(row=1, column=idx)
            cell.fill = HEADER_FILL
            cell.font = HEADER_FONT
            worksheet.column_dimensions[get_column_letter(idx)].width = width

    return buffer.getvalue()
