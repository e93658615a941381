"""HTTP client with sessions, default headers and cookies, authentication and redirect control."""

__version__ = "1.0.0"

__all__ = ["api", "exceptions", "headers", "options", "request", "response", "session"]