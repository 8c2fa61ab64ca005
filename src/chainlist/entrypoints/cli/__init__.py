"""The ``chainlist`` command-line interface."""
