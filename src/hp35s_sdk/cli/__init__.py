"""
HP 35s SDK Command-Line Interface
=================================

This package provides the ``hp35s`` command-line tool, a Click group with
one subcommand per toolkit operation:

- **export** / **import**: convert to and from the exchange format
- **estimate**: program memory use
- **report** / **goto** / **jump**: address lookups
- **check**: static program checks
- **shell**: interactive navigation session
"""

__all__ = ["hp35s"]
