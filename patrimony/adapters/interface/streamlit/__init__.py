"""Streamlit interface adapter package."""

__all__: list[str] = []
