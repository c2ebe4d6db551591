"""End-to-end tests for the ``userbase`` command line."""
