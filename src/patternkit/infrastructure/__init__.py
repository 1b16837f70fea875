"""Infrastructure layer - registries holding startup configuration."""
