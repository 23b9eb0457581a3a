"""NiceGUI interface - thin visualization layer for the news chat.

Responsibilities:
    - Transcript display with markdown content and source links
    - Error banner, typing indicator and session footer
    - Input and reset controls gated on the controller's busy flag

Contains no conversation state. Reads the SessionController and calls its
three operations. Remains a pure presentation layer.
"""
