"""Command-line tools for explorer-launcher."""
