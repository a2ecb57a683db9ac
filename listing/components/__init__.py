"""GTK widgets for the listing window."""
