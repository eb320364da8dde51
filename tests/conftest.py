"""Pytest configuration helpers.

Puts the project root on `sys.path` so `config`, `backend` and `frontend`
import the same way under pytest as under uvicorn/streamlit.
"""
import os
import sys


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
