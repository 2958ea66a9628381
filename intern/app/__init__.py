"""Application composition layer for the Tkinter GUI.

Modules in this package wire views, view models, adapters, and use cases
into a runnable desktop screen without placing business logic in views.
"""
