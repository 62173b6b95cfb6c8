"""Command-line interface for projectdeck."""
