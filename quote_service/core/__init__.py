"""
Core pipeline logic.

Submodules:
- validation: payload validator
- intake: intake handler and its Lambda adapter
- queue: durable queue contract, policy, and implementations
- notification: notification renderer
- dispatch: notification dispatcher, queue worker, and Lambda adapter
"""
