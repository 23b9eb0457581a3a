"""News Chat - conversational client for a remote news assistant service.

Combines httpx for the service API, Pydantic for data validation,
and NiceGUI for the chat page.

Components:
    - client: HTTP access to the news assistant and its error taxonomy
    - controller: Session and transcript lifecycle
    - models: Transcript and wire schemas
    - ui: Web interface for chat interactions
"""

__version__ = "0.1.0"
