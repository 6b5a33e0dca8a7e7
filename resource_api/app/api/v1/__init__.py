"""
Version 1 of the API.

Breaking changes to the resource surface should go to a new version
subpackage (e.g. ``v2``) so existing clients keep working.
"""
