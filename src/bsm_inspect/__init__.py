"""BSM Inspect - Command-line view of the BSM errno table."""
