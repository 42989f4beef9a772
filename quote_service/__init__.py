"""
Quote request pipeline.

Intake validation, durable queueing, and notification dispatch for the
website "request a quote" workflow.
"""
