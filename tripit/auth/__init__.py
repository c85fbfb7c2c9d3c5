"""
Request-token state handling for the TripIt provider.

Design goals:
- The request token survives the redirect to TripIt inside a cookie.
- The cookie is signed and timestamped (itsdangerous), never trusted blindly.
- Anything unreadable (bad signature, expired, old format) is treated as absent.
"""
