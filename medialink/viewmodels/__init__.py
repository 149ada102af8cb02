"""ViewModel package for window state.

Call context:
    ``medialink/app/main.py`` and ``medialink/app/demo_app.py`` import the
    viewmodels from this package to bind view callbacks to state transitions.

Responsibilities:
    - Hold output/input text state behind the output-surface and input ports.
    - Hold typed window settings and coerce persisted values.
    - Keep MVVM boundaries explicit by avoiding transport or persistence logic.
"""
