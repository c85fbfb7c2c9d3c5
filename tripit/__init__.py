"""
TripIt third-party authentication provider: request-token state.

Subpackages:
- `tripit.messages`: binary request-token / property-bag codecs.
- `tripit.auth`: state-cookie protection and configuration.
"""
