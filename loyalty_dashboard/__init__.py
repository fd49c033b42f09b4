"""
Core package for the loyalty assessment dashboard.

Submodules provide CSV source resolution, parsing, table rendering and the
fixed-formula calculator, plus the Streamlit UI helpers and the small Flask
CSV server. The Streamlit entry point is the top-level `app.py`.
"""
