"""Library Desk - Core Application Package

This package contains the core modules including:
- Data records (book.py)
- Book catalog and searches (catalog.py)
- Issue/return ledger (ledger.py)
- Issue/return rules (librarian.py)
- Demonstration data (seed.py)
"""
