"""Infrastructure adapters for explorer-launcher."""
