"""Command line interface for mdlint."""
