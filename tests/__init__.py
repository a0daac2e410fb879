# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the PlayerDex API:
# - test_errors.py: normalizer, envelope and error pipeline
# - test_players.py: player endpoints and store
# - test_auth.py: tokens, passwords and auth endpoints
# - test_config.py: settings parsing and CORS
# - test_mongo_client.py: connection lifecycle
#
# Run tests with: poetry run pytest
# =============================================================================
