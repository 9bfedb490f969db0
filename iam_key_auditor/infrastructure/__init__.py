"""Infrastructure layer - Adapters and configuration."""
