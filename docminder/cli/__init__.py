"""Command-line interface for docminder."""
