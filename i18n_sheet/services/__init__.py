"""Export/import engines and their orchestration."""
