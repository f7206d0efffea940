"""Command-line application: parser registry and command groups."""
