"""Command-line interface for site_percolation."""
