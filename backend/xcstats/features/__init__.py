"""Feature modules: results (normalize + aggregate) and sheets (row sources)."""
