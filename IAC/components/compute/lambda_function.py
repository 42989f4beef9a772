"""
Lambda function component for the pipeline stages.

Creates:
- CloudWatch log group for function logs
- Lambda function (ZIP archive of the quote_service package)
- Optional SQS event source mapping with partial batch responses
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import LAMBDA_DEFAULTS, LAMBDA_RUNTIME
from IAC.utils.naming import ResourceNamer
from IAC.utils.tags import create_tags


@dataclass
class LambdaOutputs:
    """Output values from Lambda component."""
    function_arn: pulumi.Output[str]
    function_name: pulumi.Output[str]
    invoke_arn: pulumi.Output[str]


class LambdaFunctionComponent(pulumi.ComponentResource):
    """
    Lambda function hosting one pipeline stage.

    Used twice: the intake function behind API Gateway and the dispatcher
    function triggered by the quote queue.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        namer: ResourceNamer,
        handler: str,
        role_arn: pulumi.Input[str],
        code_path: str,
        timeout: int,
        environment_variables: dict[str, pulumi.Input[str]],
        memory_size: int = LAMBDA_DEFAULTS["memory_mb"],
        sqs_queue_arn: pulumi.Input[str] | None = None,
        stage: str | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:LambdaFunction", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # CloudWatch Log Group
        self.log_group = aws.cloudwatch.LogGroup(
            f"{name}-logs",
            name=namer.log_group_name(name),
            retention_in_days=LAMBDA_DEFAULTS["log_retention_days"],
            tags=create_tags(environment, f"{name}-logs", stage=stage),
            opts=child_opts,
        )

        self.function = aws.lambda_.Function(
            f"{name}-function",
            name=name,
            role=role_arn,
            runtime=LAMBDA_RUNTIME,
            handler=handler,
            code=pulumi.FileArchive(code_path),
            memory_size=memory_size,
            timeout=timeout,
            environment=aws.lambda_.FunctionEnvironmentArgs(
                variables={
                    "ENVIRONMENT": environment,
                    "LOG_LEVEL": "INFO",
                    **environment_variables,
                },
            ),
            tags=create_tags(environment, f"{name}-function", stage=stage),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[self.log_group],
            ),
        )

        self.event_source = None
        if sqs_queue_arn is not None:
            # Failed records are reported individually and redelivered alone
            self.event_source = aws.lambda_.EventSourceMapping(
                f"{name}-sqs-trigger",
                event_source_arn=sqs_queue_arn,
                function_name=self.function.arn,
                batch_size=1,
                maximum_batching_window_in_seconds=0,
                function_response_types=["ReportBatchItemFailures"],
                opts=child_opts,
            )

        self.register_outputs({
            "function_arn": self.function.arn,
            "function_name": self.function.name,
        })

    def get_outputs(self) -> LambdaOutputs:
        """Get Lambda output values."""
        return LambdaOutputs(
            function_arn=self.function.arn,
            function_name=self.function.name,
            invoke_arn=self.function.invoke_arn,
        )
