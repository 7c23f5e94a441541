"""Bundled data files for fileman."""
