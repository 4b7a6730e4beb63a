"""
Package marker for source code under `src`.
It groups the dashboard and shared helper packages under a stable import path.
"""
