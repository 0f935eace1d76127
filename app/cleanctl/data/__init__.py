"""Bundled data files for cleanctl."""
