"""NextStep: profile-driven portfolio and resume rendering with AI career tools."""

__version__ = "0.1.0"
