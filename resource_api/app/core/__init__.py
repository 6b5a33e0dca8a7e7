"""
Cross-cutting pieces: settings, logging, database bootstrap and the
error taxonomy with its HTTP handlers.
"""
