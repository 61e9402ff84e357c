"""Infrastructure layer - adapters for persistence and event delivery."""
