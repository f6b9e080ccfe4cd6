"""
EcoLar - household sustainability profile service.

Packages:
- ecolar: settings, Supabase access, auth, FastAPI app, CLI
- onboarding: first-run household profile wizard
"""

__version__ = "1.0.0"
