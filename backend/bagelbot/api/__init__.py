"""HTTP API package.

- root: service banner
- entries: order submission, listing and status updates
- store_status: guarded store open/closed toggle
- errors: uniform ``{"error": ...}`` error bodies
"""
