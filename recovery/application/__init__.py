"""Application layer: use-case orchestration over domain protocols."""
