# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web application:
# - main.py: create_app(), middleware setup, error handlers
# - server.py: process bootstrap (database, HTTP/HTTPS, uvicorn)
# - config.py: Environment variable loading and settings
# - exceptions.py: error variants, normalizer and responder
# - routers/, auth/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# persistence to the core/ package.
# =============================================================================
