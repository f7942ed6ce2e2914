# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - exceptions.py: DomainError / fallback exception handlers
# - dependencies.py: Injected SequenceStore
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# computation, validation and error classification to the core/ package.
# =============================================================================

__version__ = "1.0.0"
