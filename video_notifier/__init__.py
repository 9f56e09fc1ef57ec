"""Brightcove → CMS notifier relay."""
