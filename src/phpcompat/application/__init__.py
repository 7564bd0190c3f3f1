"""phpcompat application layer.

Sniffs, version gate, sinks, scanning service and reporters.
"""
