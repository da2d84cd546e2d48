"""FastAPI backend serving the Speech Lab API."""
