"""
Generators — produce the boilerplate files written into the host project.

Each generator module exposes ``generate_*()`` functions that return
``GeneratedFile`` instances (or plain strings for in-place edits).
"""
