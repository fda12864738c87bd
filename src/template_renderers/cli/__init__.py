"""CLI module.

This module provides the command-line interface for the template renderers.
"""
