"""Settings, logging, database access and error handling."""
