"""HTTP layer: shared dependencies and versioned routers."""
