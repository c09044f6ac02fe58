"""
Routers module - API endpoint handlers organized by feature.

- auth: Google sign-in, raw events proxy, logout
- calendar: filtered event listing
"""
