# Digital twin package: RAG query service, MCP adapter and profile loader.

__version__ = "1.0.0"
