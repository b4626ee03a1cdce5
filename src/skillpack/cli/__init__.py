"""Command-line interface for skillpack."""
