"""
Version 1 of the API.

Bundles the Pokémon and type endpoints.  Breaking changes should go
into a new version subpackage (e.g. ``v2``).
"""
