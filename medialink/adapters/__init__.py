"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (the offline media
    service and local preference storage).

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
