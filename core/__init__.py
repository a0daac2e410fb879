# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the domain layer:
# - models/: Pydantic schemas for players and credentials
# - services/: MongoDB-backed stores for those records
#
# Code in this package never sees requests or responses; it raises the
# app.exceptions variants and is reused as-is by scripts/.
# =============================================================================
