"""
Restaurant lookup.

Responsibilities:
- Define the lookup capability the chat handler depends on.
- Provide the fixed stub data source used until a real places API is wired in.
"""
