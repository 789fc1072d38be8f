"""Library Menu - Core Application Package

This package contains the core application modules including:
- Interactive menu and book store (library.py)
- Stock menu actions (actions.py)
- CLI entry point (main.py)
- Data model (book.py)
- Validated input prompts (prompts.py)
- Settings (config.py)
"""
