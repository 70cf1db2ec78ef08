"""
External catalog integrations (Jikan, TMDb, RAWG).

Each provider client lives in its own subpackage and only speaks the provider's
JSON; mapping into `UnifiedResult` happens in `media_hub.normalize`.
"""
