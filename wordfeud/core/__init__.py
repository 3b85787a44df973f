"""Small value types shared by the executor and the high-level client.

Kept free of HTTP concerns so tests can build them directly.
"""
