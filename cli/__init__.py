"""Command-line front end for the outliner."""
