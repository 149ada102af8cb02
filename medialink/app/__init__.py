"""Application composition layer for the Tkinter windows.

Modules in this package wire views, view models, adapters, and use cases
into runnable desktop apps without placing business logic in views.
"""
