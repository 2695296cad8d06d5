"""Services module.

This module provides the service layer architecture:
- exceptions: Custom service exceptions
- entries: Order entry intake, listing and status updates
- store_status: Guarded store open/closed singleton
"""
