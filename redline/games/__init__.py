"""
Games module - Concrete race content.

Each ruleset has its own subpackage with:
- Card definitions
- Track layouts
- Race setup
"""
