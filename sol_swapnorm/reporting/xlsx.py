"""XLSX export helpers."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from ..types import NormalizedSwap
from .formats import swap_row
from .schema import NORMALIZED_SWAP_COLUMNS


def _apply_header_style(sheet) -> None:
    bold = Font(bold=True)
    for cell in sheet[1]:
        cell.font = bold
    sheet.auto_filter.ref = sheet.dimensions
    sheet.freeze_panes = "A2"


def _auto_width(sheet) -> None:
    for col in sheet.columns:
        values = [str(cell.value) if cell.value is not None else "" for cell in col]
        max_len = max((len(value) for value in values), default=0)
        col_letter = get_column_letter(col[0].column)
        sheet.column_dimensions[col_letter].width = min(max_len + 2, 60)


def write_xlsx(path: Path, swaps: Sequence[NormalizedSwap]) -> None:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Swaps"
    sheet.append(NORMALIZED_SWAP_COLUMNS)
    for swap in swaps:
        row = swap_row(swap)
        sheet.append([row[column] for column in NORMALIZED_SWAP_COLUMNS])
    _apply_header_style(sheet)
    _auto_width(sheet)
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
