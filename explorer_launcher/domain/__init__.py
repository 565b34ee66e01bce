"""Domain layer for explorer-launcher."""
