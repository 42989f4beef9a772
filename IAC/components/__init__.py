"""
Pulumi component resources for the quote request pipeline.

Each submodule provides reusable ComponentResource classes:
- messaging: SQS quote queue and dead letter queue
- security: SES identities, IAM roles
- compute: Lambda functions (intake, dispatcher)
- edge: HTTP API Gateway
"""
