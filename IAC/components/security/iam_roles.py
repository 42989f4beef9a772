"""
IAM roles component for the pipeline Lambdas.

Creates:
- Intake Lambda role allowed to send to the quote queue only
- Dispatcher Lambda role allowed to consume the quote queue and send email
  from the verified identities only
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.utils.tags import create_tags

LAMBDA_BASIC_EXECUTION_POLICY = (
    "arn:aws:iam::aws:policy/service-role/AWSLambdaBasicExecutionRole"
)

LAMBDA_ASSUME_ROLE_POLICY = json.dumps({
    "Version": "2012-10-17",
    "Statement": [{
        "Effect": "Allow",
        "Principal": {"Service": "lambda.amazonaws.com"},
        "Action": "sts:AssumeRole",
    }],
})


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    intake_role_arn: pulumi.Output[str]
    dispatcher_role_arn: pulumi.Output[str]


def intake_policy_document(queue_arn: str) -> str:
    """Intake may only enqueue."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Action": ["sqs:SendMessage"],
                "Resource": [queue_arn],
            },
        ],
    })


def dispatcher_policy_document(queue_arn: str, identity_arns: list[str]) -> str:
    """Dispatcher consumes the queue and sends through the verified identities."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Action": [
                    "sqs:ReceiveMessage",
                    "sqs:DeleteMessage",
                    "sqs:ChangeMessageVisibility",
                    "sqs:GetQueueAttributes",
                ],
                "Resource": [queue_arn],
            },
            {
                "Effect": "Allow",
                "Action": ["ses:SendEmail", "ses:SendRawEmail"],
                "Resource": sorted(set(identity_arns)),
            },
        ],
    })


class IamRolesComponent(pulumi.ComponentResource):
    """
    IAM roles for the intake and dispatcher Lambdas.

    Follows least-privilege principle with specific resource permissions.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        queue_arn: pulumi.Input[str],
        identity_arns: list[pulumi.Input[str]],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # Intake Role
        self.intake_role = aws.iam.Role(
            f"{name}-intake-role",
            assume_role_policy=LAMBDA_ASSUME_ROLE_POLICY,
            tags=create_tags(environment, f"{name}-intake-role", stage="intake"),
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-intake-basic-execution",
            role=self.intake_role.name,
            policy_arn=LAMBDA_BASIC_EXECUTION_POLICY,
            opts=child_opts,
        )

        aws.iam.RolePolicy(
            f"{name}-intake-policy",
            role=self.intake_role.id,
            policy=pulumi.Output.from_input(queue_arn).apply(intake_policy_document),
            opts=child_opts,
        )

        # Dispatcher Role
        self.dispatcher_role = aws.iam.Role(
            f"{name}-dispatcher-role",
            assume_role_policy=LAMBDA_ASSUME_ROLE_POLICY,
            tags=create_tags(environment, f"{name}-dispatcher-role", stage="dispatch"),
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-dispatcher-basic-execution",
            role=self.dispatcher_role.name,
            policy_arn=LAMBDA_BASIC_EXECUTION_POLICY,
            opts=child_opts,
        )

        aws.iam.RolePolicy(
            f"{name}-dispatcher-policy",
            role=self.dispatcher_role.id,
            policy=pulumi.Output.all(queue_arn, *identity_arns).apply(
                lambda arns: dispatcher_policy_document(arns[0], list(arns[1:]))
            ),
            opts=child_opts,
        )

        self.register_outputs({
            "intake_role_arn": self.intake_role.arn,
            "dispatcher_role_arn": self.dispatcher_role.arn,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            intake_role_arn=self.intake_role.arn,
            dispatcher_role_arn=self.dispatcher_role.arn,
        )
