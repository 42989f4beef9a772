"""
Pulumi infrastructure-as-code for the quote request pipeline.

This package defines AWS infrastructure including:
- SQS quote queue with a dead letter queue
- SES identities for the notification sender and sales rep
- Lambda functions for intake and notification dispatch
- HTTP API Gateway exposing POST /quote
"""
