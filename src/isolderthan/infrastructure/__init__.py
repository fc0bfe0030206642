"""Infrastructure layer: filesystem access.

Infrastructure may import from domain but never from services,
commands, or output.
"""
