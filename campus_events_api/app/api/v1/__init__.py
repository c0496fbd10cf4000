"""
Version 1 of the API.

This subpackage bundles the endpoints used by the campus events
browser client and by ``campus_events_client``.
"""
