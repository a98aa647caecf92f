"""Domain services.

Imports are intentionally NOT eagerly loaded here to avoid pulling in
provider SDKs during test collection. Use explicit imports:
    from lingorelay.services.relay import RelayService
"""
