"""Help layout and diagnostics libraries."""
