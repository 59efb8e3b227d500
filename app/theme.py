from pathlib import Path
import streamlit as st


def use_theme(page_title: str = "Mess Cut") -> None:
    """Apply page config and inject the calendar CSS once per run."""
    st.set_page_config(page_title=page_title, page_icon="✂️", layout="centered")
    css_path = Path(__file__).with_name("theme.css")
    if css_path.exists():
        st.markdown(
            f"<style>{css_path.read_text(encoding='utf-8')}</style>",
            unsafe_allow_html=True,
        )
