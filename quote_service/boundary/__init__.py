"""
Boundary layer.

Adapters to external systems: the durable queue backends and the email
provider.
"""
