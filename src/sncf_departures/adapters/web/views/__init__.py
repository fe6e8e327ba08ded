"""LiveViews for web display."""
