"""Decode an uploaded spreadsheet or delimited text file into row records."""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".csv", ".tsv", ".txt", ".xlsx", ".xls")


class RowDecodeError(ValueError):
    """Raised when an uploaded file cannot be read into rows."""


def _upload_name(uploaded_file: Any) -> str:
    return str(getattr(uploaded_file, "name", uploaded_file))


def _load_raw_table(uploaded_file: Any) -> pd.DataFrame:
    name = _upload_name(uploaded_file).lower()
    if name.endswith(".xlsx"):
        return pd.read_excel(uploaded_file, sheet_name=0)
    if name.endswith(".xls"):
        # Legacy .xls needs xlrd.
        return pd.read_excel(uploaded_file, sheet_name=0, engine="xlrd")
    # Delimiter is sniffed from the header row.
    return pd.read_csv(uploaded_file, sep=None, engine="python", skip_blank_lines=True)


def frame_to_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a frame into plain row mappings with missing cells as None."""
    out = df.copy()
    out.columns = [str(col).strip() for col in out.columns]
    out = out.drop(columns=[col for col in out.columns if col.startswith("Unnamed")])
    out = out.dropna(how="all")
    out = out.astype(object).where(out.notna(), None)
    return out.to_dict(orient="records")


def load_rows(uploaded_file: Any) -> list[dict[str, Any]]:
    """Read the first sheet/table of an upload into row records.

    Accepts a path or any file-like object with a ``name`` attribute.
    """
    name = _upload_name(uploaded_file)
    if not name.lower().endswith(SUPPORTED_EXTENSIONS):
        raise ValueError(
            f"Unsupported file type: {name or '<unknown>'}. Supported: csv, tsv, txt, xlsx, xls."
        )

    try:
        df = _load_raw_table(uploaded_file)
    except Exception as exc:
        raise RowDecodeError(f"Could not read {name}: {exc}") from exc

    rows = frame_to_rows(df)
    logger.info("Decoded %d row(s) with %d column(s) from %s.", len(rows), len(df.columns), name)
    return rows
