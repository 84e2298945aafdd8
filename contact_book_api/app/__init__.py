"""
Application package initializer.

Contains the API entrypoint and its submodules: ``core`` (settings,
logging, database, error handling), ``models`` (domain objects),
``schemas`` (wire payloads), ``services`` (validation, storage and
business logic) and ``api`` (versioned routers).
"""
