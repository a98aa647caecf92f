"""Translation providers and resolution.

Imports are intentionally NOT eagerly loaded here so the openai SDK is only
imported where the LLM adapter is used. Use explicit imports:
    from lingorelay.services.translation.cascade import CascadeResolver
"""
