"""Shared constants, settings, errors and logging for safe_fileutils."""
