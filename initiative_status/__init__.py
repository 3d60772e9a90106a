"""
Core package for the initiative status dashboard.

Submodules provide Linear data access and normalization, dashboard frames and
filters, and the Streamlit rendering helpers orchestrated by `app.py`.
"""
