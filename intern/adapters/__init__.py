"""Adapter package for header-info data sources.

Purpose:
    Collect concrete implementations of ``HeaderInfoPort`` used by the app
    composition layer and by tests.

Call context:
    Imported by ``intern.app.main`` for runtime wiring and by tests as a
    deterministic offline source.
"""
