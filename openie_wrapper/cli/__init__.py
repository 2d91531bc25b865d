"""Command-line interface for openie-wrapper."""
