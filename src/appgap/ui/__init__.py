"""Streamlit UI for AppGap."""
