"""Mess cut export.

Offers the stored marks as CSV (one row per marked day) and as the raw storage
document. Everything is generated in memory and handed to download buttons.
"""

from __future__ import annotations

import json

import pandas as pd
import streamlit as st

from app.mess_cut_store import MessCutStore

EXPORT_COLUMNS = ["date", "month", "note", "timestamp"]


def marks_frame(store: MessCutStore) -> pd.DataFrame:
    rows = [
        {
            "date": day.isoformat(),
            "month": day.strftime("%Y-%m"),
            "note": entry.note,
            "timestamp": entry.timestamp,
        }
        for day, entry in store.marks()
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def monthly_totals(store: MessCutStore) -> pd.DataFrame:
    df = marks_frame(store)
    if df.empty:
        return pd.DataFrame(columns=["month", "count"])
    return df.groupby("month").size().reset_index(name="count")


def show_export_section(store: MessCutStore) -> None:
    with st.expander("⬇️ Export", expanded=False):
        df = marks_frame(store)
        if df.empty:
            st.caption("No mess cuts marked yet.")
            return

        st.dataframe(monthly_totals(store), hide_index=True, use_container_width=True)
        c1, c2 = st.columns(2)
        c1.download_button(
            "Download CSV",
            df.to_csv(index=False).encode("utf-8"),
            file_name="mess_cuts.csv",
            mime="text/csv",
            key="export__csv",
        )
        c2.download_button(
            "Download JSON",
            json.dumps(store.document(), ensure_ascii=False, indent=2).encode("utf-8"),
            file_name="mess_cuts.json",
            mime="application/json",
            key="export__json",
        )


__all__ = ["marks_frame", "monthly_totals", "show_export_section"]
