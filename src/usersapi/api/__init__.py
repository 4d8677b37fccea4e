"""API layer: event parsing, routing, input checks and response envelopes.

The api layer may import from services, domain, config and infrastructure.
Services never import from here.
"""
