"""Test suite for the pysharp signature reflector.

Test Structure:
- config/: Tests for configuration management
- domain/models/: Tests for the Python and C# syntax models
- domain/services/: Tests for reflection and signature loading
- infrastructure/: Tests for logging setup
- utils/: Tests for utility functions
- test_main.py: Command line end-to-end tests

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run end-to-end tests only
"""

__version__ = "0.1.0"
