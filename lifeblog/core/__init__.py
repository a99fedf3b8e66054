"""Logging, configuration, paths and exceptions shared by all lifeblog modules."""
