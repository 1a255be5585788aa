"""
Comparison package.

Responsibilities:
- Resolve exactly two model ids from a snapshot for side-by-side display.
- Record a hard interest signal for each selected model.
"""
