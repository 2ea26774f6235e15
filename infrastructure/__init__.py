"""Infrastructure layer: persistence adapters, external APIs, configuration."""
