"""
openventuro test suite
======================

Test Modules
------------
- test_models.py: Tests for request/config models and the error type
- test_arguments.py: Tests for the init argument parser
- test_prompts.py: Tests for interactive input resolution
- test_generator.py: Tests for preflight, rendering and file writing
- test_cli.py: Tests for the command-line interface
- test_config.py: Tests for settings and logging setup

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_arguments.py

    # Run specific test class
    pytest tests/test_arguments.py::TestDeployTargetFlag
"""
