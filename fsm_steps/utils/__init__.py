"""
Utility functions module.

Time Semantics:
- Record timestamps are integer milliseconds since the Unix epoch
- Wall-clock time is the only clock; there is no monotonic or injected time
- Datetimes produced from timestamps are always timezone-aware UTC
"""
