"""
Compute components for the pipeline Lambdas.

Components:
- LambdaFunctionComponent: Lambda function with optional SQS trigger
"""

from IAC.components.compute.lambda_function import LambdaFunctionComponent, LambdaOutputs

__all__ = [
    "LambdaFunctionComponent",
    "LambdaOutputs",
]
