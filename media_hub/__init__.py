"""
Shared media hub library code.

This package holds the provider clients and the normalization layer used by:
- the FastAPI app in `api/`
- command-line helpers in `scripts/`

App entrypoints should import from `media_hub` rather than the other way around.
"""
