"""
Contracts (data models).

This folder defines the shapes exchanged with the product feed:
- Product / ProductResponse: the decoded feed document
- ProductSource: the interface both the real HTTP and the local mock client implement

The state holder and the renderer rely on these models, not on ad-hoc dicts.
"""
