"""NiceGUI interface - page shell and floating chat widget.

Responsibilities:
    - Common layout with navbar, content slot and footer
    - Floating chat button and panel
    - Per-page chat session (history, busy flag, open state)

The session module has no NiceGUI dependency and holds all chat state;
the widget only renders it.
"""
