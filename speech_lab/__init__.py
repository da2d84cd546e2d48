"""Speech Lab — progress tracker for self-study speech training."""
