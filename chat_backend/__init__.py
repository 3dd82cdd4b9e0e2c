"""Session chat backend: persisted conversation sessions with LLM replies."""

__version__ = "0.1.0"
