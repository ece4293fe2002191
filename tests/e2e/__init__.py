"""End-to-end tests for the termdemo command line."""
