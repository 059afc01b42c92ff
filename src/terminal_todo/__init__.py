"""Two-tab (todo/done) task tracker for the terminal."""
