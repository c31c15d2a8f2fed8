"""Command-line interface for freesms."""
