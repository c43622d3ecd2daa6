"""
Application layer.

Use cases orchestrating the reading domain for the web surface: opening
reader sessions, feeding them navigation events one at a time and turning
transitions into what the client has to render or scroll.
"""
