"""
SQS queues component for quote request delivery.

Creates:
- Main queue holding serialized quote requests
- Dead letter queue for requests that failed max_receive_count deliveries
- Redrive allow policy restricting the DLQ to the main queue
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import SQS_DEFAULTS
from IAC.utils.tags import create_tags
from IAC.utils.naming import ResourceNamer


@dataclass
class SqsOutputs:
    """Output values from SQS queues component."""
    queue_url: pulumi.Output[str]
    queue_arn: pulumi.Output[str]
    dlq_url: pulumi.Output[str]
    dlq_arn: pulumi.Output[str]


def redrive_policy_document(dlq_arn: str) -> str:
    """Redrive policy JSON sending messages to the DLQ after max_receive_count failures."""
    return json.dumps({
        "deadLetterTargetArn": dlq_arn,
        "maxReceiveCount": SQS_DEFAULTS["max_receive_count"],
    })


class SqsQueuesComponent(pulumi.ComponentResource):
    """
    SQS queues decoupling intake from notification delivery.

    Main queue triggers the dispatcher Lambda. Its visibility timeout is the
    lease each delivery attempt gets; the dead letter queue keeps failed
    requests twice as long as the main queue for manual redrive.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        namer: ResourceNamer,
        visibility_timeout_seconds: int = SQS_DEFAULTS["visibility_timeout_seconds"],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:messaging:SqsQueues", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # Dead Letter Queue (must be created first for redrive policy)
        self.dlq = aws.sqs.Queue(
            f"{name}-dlq",
            name=namer.queue_name("quotes", dead_letter=True),
            message_retention_seconds=SQS_DEFAULTS["dlq_message_retention_seconds"],
            tags=create_tags(environment, f"{name}-dlq", stage="queue"),
            opts=child_opts,
        )

        # Main Queue with redrive policy
        self.queue = aws.sqs.Queue(
            f"{name}-queue",
            name=namer.queue_name("quotes"),
            visibility_timeout_seconds=visibility_timeout_seconds,
            message_retention_seconds=SQS_DEFAULTS["message_retention_seconds"],
            redrive_policy=self.dlq.arn.apply(redrive_policy_document),
            tags=create_tags(environment, f"{name}-queue", stage="queue"),
            opts=child_opts,
        )

        # Allow DLQ to receive from main queue only
        aws.sqs.RedriveAllowPolicy(
            f"{name}-redrive-allow",
            queue_url=self.dlq.url,
            redrive_allow_policy=self.queue.arn.apply(
                lambda arn: json.dumps({
                    "redrivePermission": "byQueue",
                    "sourceQueueArns": [arn],
                })
            ),
            opts=child_opts,
        )

        self.register_outputs({
            "queue_url": self.queue.url,
            "queue_arn": self.queue.arn,
            "dlq_url": self.dlq.url,
            "dlq_arn": self.dlq.arn,
        })

    def get_outputs(self) -> SqsOutputs:
        """Get SQS queue output values."""
        return SqsOutputs(
            queue_url=self.queue.url,
            queue_arn=self.queue.arn,
            dlq_url=self.dlq.url,
            dlq_arn=self.dlq.arn,
        )
