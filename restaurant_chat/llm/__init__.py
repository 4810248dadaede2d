"""
LLM integration layer.

Responsibilities:
- Resolve the Ollama endpoint, model and timeout once at process start.
- Serialize chat requests and call the Ollama /api/chat endpoint.
- Surface transport, read, status and decode failures as typed errors.
"""
