"""Core infrastructure for fileman: paths, configuration and theming."""
