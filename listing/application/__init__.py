"""GTK application."""
