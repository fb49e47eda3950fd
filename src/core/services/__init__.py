"""Core services: detail caching, filtering and browse orchestration."""
