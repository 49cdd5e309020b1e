"""Studio services: scene logic independent of the UI (no Qt imports)."""
