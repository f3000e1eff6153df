"""Streamlit explorer for the country collection."""
