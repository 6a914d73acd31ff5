"""qmpo API - commands returning StageResult objects."""
