"""Rich/JSON output for CLI commands."""
