"""
Only the root tests directory carries an __init__.py file.

It lets pytest treat tests/ as a package, so tests/conftest.py is imported consistently
across environments. The subdirectories work as namespace packages (PEP 420), which is
why every test module needs a unique file name.
"""
