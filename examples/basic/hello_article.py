"""Render a content-tree article as external XHTML in 3 lines."""

from external_bodyxml import transform

payload = b"""{"type": "root", "body": {"type": "body", "version": 1, "children": [
    {"type": "heading", "level": "chapter", "children": [{"type": "text", "value": "Hello"}]},
    {"type": "paragraph", "children": [{"type": "text", "value": "World"}]}
]}}"""
print(transform(payload))
