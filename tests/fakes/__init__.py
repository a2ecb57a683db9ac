"""Hand-written fakes for the listing tests."""
