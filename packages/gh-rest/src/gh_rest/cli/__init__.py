"""Command-line interface for gh_rest."""
