"""Render driver: rich renderables and Textual widgets for the two panes."""
