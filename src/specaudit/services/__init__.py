"""Service layer: load documents, run the engine, persist the one write."""
