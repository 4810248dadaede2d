"""
Restaurant chat bridge.

Exposes an OpenAI-compatible ``/v1/chat/completions`` endpoint that turns a
location/query into a restaurant recommendation from a local Ollama model.
"""
