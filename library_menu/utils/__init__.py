"""Library Menu - Utilities Package

This package contains the helpers shared by the menu and its actions:
- Input patterns and validators (validators.py)
- Terminal abstraction and table rendering (ui_helpers.py)
"""
