"""
Pulumi program entry point for the quote request pipeline.

Instantiates all component resources in dependency order, passing each
component's outputs explicitly to the components that need them:
1. Configuration (timeouts validated before any resource exists)
2. SQS Queues (main + DLQ)
3. SES Identities (sender + sales rep)
4. IAM Roles (queue ARN + identity ARNs)
5. Lambda Functions (intake, dispatcher)
6. API Gateway (intake function)
"""

import pulumi

from IAC.configs.environment import get_config
from IAC.configs.timeouts import validate_timeouts
from IAC.utils.naming import ResourceNamer

# Messaging
from IAC.components.messaging.sqs_queues import SqsQueuesComponent

# Security
from IAC.components.security.ses_identities import SesIdentitiesComponent
from IAC.components.security.iam_roles import IamRolesComponent

# Compute
from IAC.components.compute.lambda_function import LambdaFunctionComponent

# Edge
from IAC.components.edge.api_gateway import ApiGatewayComponent

INTAKE_HANDLER = "quote_service.core.intake.lambda_handler.handler"
DISPATCHER_HANDLER = "quote_service.core.dispatch.lambda_handler.handler"


def main() -> None:
    """Deploy the quote request pipeline."""
    # Load configuration
    config = get_config()
    visibility_timeout = validate_timeouts(config)
    namer = ResourceNamer(project="quote-pipeline", environment=config.environment)
    base_name = namer.name("quotes")

    # --- Layer 1: Messaging ---
    sqs_queues = SqsQueuesComponent(
        name=base_name,
        environment=config.environment,
        namer=namer,
        visibility_timeout_seconds=visibility_timeout,
    )
    sqs_outputs = sqs_queues.get_outputs()

    # --- Layer 2: Email identities ---
    ses_identities = SesIdentitiesComponent(
        name=base_name,
        sender_email=config.sender_email,
        sales_rep_email=config.sales_rep_email,
    )
    ses_outputs = ses_identities.get_outputs()

    # --- Layer 3: IAM Roles ---
    iam_roles = IamRolesComponent(
        name=base_name,
        environment=config.environment,
        queue_arn=sqs_outputs.queue_arn,
        identity_arns=[
            ses_outputs.sender_identity_arn,
            ses_outputs.recipient_identity_arn,
        ],
    )
    iam_outputs = iam_roles.get_outputs()

    aws_region = pulumi.Config("aws").get("region") or "ap-southeast-2"

    # --- Layer 4: Compute ---
    intake = LambdaFunctionComponent(
        name=namer.name("intake"),
        environment=config.environment,
        namer=namer,
        handler=INTAKE_HANDLER,
        role_arn=iam_outputs.intake_role_arn,
        code_path=config.code_path,
        timeout=config.intake_timeout,
        memory_size=config.lambda_memory,
        environment_variables={
            "QUEUE_BACKEND": "sqs",
            "QUEUE_URL": sqs_outputs.queue_url,
            "QUEUE_REGION": aws_region,
        },
        stage="intake",
    )
    intake_outputs = intake.get_outputs()

    dispatcher = LambdaFunctionComponent(
        name=namer.name("dispatcher"),
        environment=config.environment,
        namer=namer,
        handler=DISPATCHER_HANDLER,
        role_arn=iam_outputs.dispatcher_role_arn,
        code_path=config.code_path,
        timeout=config.dispatcher_timeout,
        memory_size=config.lambda_memory,
        environment_variables={
            "SALES_REP_EMAIL": config.sales_rep_email,
            "SENDER_EMAIL": config.sender_email,
            "SES_REGION": aws_region,
            "QUEUE_REGION": aws_region,
            "DISPATCHER_TIMEOUT_SECONDS": str(config.dispatcher_timeout),
        },
        sqs_queue_arn=sqs_outputs.queue_arn,
        stage="dispatch",
        opts=pulumi.ResourceOptions(depends_on=[iam_roles]),
    )
    dispatcher_outputs = dispatcher.get_outputs()

    # --- Layer 5: Edge ---
    api_gateway = ApiGatewayComponent(
        name=base_name,
        environment=config.environment,
        intake_function_name=intake_outputs.function_name,
        intake_invoke_arn=intake_outputs.invoke_arn,
        allowed_origins=config.allowed_origins,
        integration_timeout_seconds=config.intake_timeout,
    )
    api_outputs = api_gateway.get_outputs()

    # --- Exports ---
    # api_endpoint is consumed by the static site build
    outputs = {
        "api_endpoint": api_outputs.api_endpoint,
        "quote_queue_url": sqs_outputs.queue_url,
        "quote_dlq_url": sqs_outputs.dlq_url,
        "intake_function_name": intake_outputs.function_name,
        "dispatcher_function_name": dispatcher_outputs.function_name,
    }

    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
