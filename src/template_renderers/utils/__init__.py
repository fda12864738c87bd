"""Utility modules for Template Renderers."""
