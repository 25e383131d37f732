"""Test suite for ListBetter Property.

Test Structure:
- domain/models/: descriptor and structured object models
- domain/services/introspection/: descriptor sources and property enumeration
- domain/services/views/: text formatting, grouping and counting
- config/: configuration management
- infrastructure/: logging setup and helpers
- test_main.py: command line entry point

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run command line tests only
"""
