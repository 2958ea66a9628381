"""ViewModel package for UI state and intent surfaces.

Call context:
    ``intern/app/main.py`` and the screen binding import concrete view models
    from this package to connect view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types, use cases and formatting
    helpers only. Tk widgets and scheduling remain in ``intern.app``.

Responsibilities:
    - Publish immutable UI state through a replay-latest stream.
    - Accept user intents and turn them into state transitions.
    - Transform domain records into display-ready UI models.
"""
