# This package contains the Streamlit dashboard for geopolitical risk scenarios.
# Datasets, theme, layout planning, and chart builders live in separate modules; `app` mounts the result.

__all__ = ["app"]
