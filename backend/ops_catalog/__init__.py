"""Async data-access store for users, tasks, registered models and ingestion jobs."""
