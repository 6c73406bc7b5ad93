"""CLI commands for strongpass."""
