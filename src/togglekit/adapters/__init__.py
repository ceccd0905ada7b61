"""Adapters – framework and transport integrations."""
