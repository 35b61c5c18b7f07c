"""adkgen - scaffold runnable ADK agent projects."""

__version__ = "0.1.0"
