"""Tool modules registered by conductor.py."""
