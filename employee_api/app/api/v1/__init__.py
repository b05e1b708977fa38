"""
Version 1 of the Employee API.

Breaking changes to the wire format should go into a new version
subpackage rather than altering these endpoints.
"""
