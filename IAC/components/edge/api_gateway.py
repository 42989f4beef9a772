"""
API Gateway component for the quote intake endpoint.

HTTP API in front of the intake Lambda:
1. API: protocol type and CORS (site origins, POST, Content-Type only).
2. Integration: Lambda proxy (payload format 2.0).
3. Route: POST /quote to the integration.
4. Stage: "$default" auto-deployed stage with throttling limits.
5. Permission: lets API Gateway invoke the intake function.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import API_THROTTLING
from IAC.utils.tags import create_tags

QUOTE_ROUTE_KEY = "POST /quote"


@dataclass
class ApiGatewayOutputs:
    """Output values from API Gateway component."""
    api_endpoint: pulumi.Output[str]
    api_id: pulumi.Output[str]


class ApiGatewayComponent(pulumi.ComponentResource):
    """
    HTTP API Gateway with a Lambda proxy route to intake.

    Rate limiting on the stage is the pipeline's abuse protection.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        intake_function_name: pulumi.Input[str],
        intake_invoke_arn: pulumi.Input[str],
        allowed_origins: list[str],
        integration_timeout_seconds: int,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:edge:ApiGateway", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # HTTP API
        self.api = aws.apigatewayv2.Api(
            f"{name}-api",
            name=f"{name}-api",
            protocol_type="HTTP",
            cors_configuration=aws.apigatewayv2.ApiCorsConfigurationArgs(
                allow_origins=allowed_origins,
                allow_methods=["POST"],
                allow_headers=["Content-Type"],
                max_age=86400,
            ),
            tags=create_tags(environment, f"{name}-api", stage="intake"),
            opts=child_opts,
        )

        # Lambda proxy integration
        self.integration = aws.apigatewayv2.Integration(
            f"{name}-integration",
            api_id=self.api.id,
            integration_type="AWS_PROXY",
            integration_uri=intake_invoke_arn,
            integration_method="POST",
            payload_format_version="2.0",
            timeout_milliseconds=integration_timeout_seconds * 1000,
            opts=child_opts,
        )

        self.route = aws.apigatewayv2.Route(
            f"{name}-quote-route",
            api_id=self.api.id,
            route_key=QUOTE_ROUTE_KEY,
            target=self.integration.id.apply(lambda id: f"integrations/{id}"),
            opts=child_opts,
        )

        # Default stage with auto-deploy and throttling
        self.stage = aws.apigatewayv2.Stage(
            f"{name}-stage",
            api_id=self.api.id,
            name="$default",
            auto_deploy=True,
            default_route_settings=aws.apigatewayv2.StageDefaultRouteSettingsArgs(
                throttling_burst_limit=API_THROTTLING["burst_limit"],
                throttling_rate_limit=API_THROTTLING["rate_limit"],
            ),
            tags=create_tags(environment, f"{name}-stage", stage="intake"),
            opts=child_opts,
        )

        aws.lambda_.Permission(
            f"{name}-invoke-permission",
            action="lambda:InvokeFunction",
            function=intake_function_name,
            principal="apigateway.amazonaws.com",
            source_arn=self.api.execution_arn.apply(lambda arn: f"{arn}/*/*"),
            opts=child_opts,
        )

        self.register_outputs({
            "api_endpoint": self.api.api_endpoint,
            "api_id": self.api.id,
        })

    def get_outputs(self) -> ApiGatewayOutputs:
        """Get API Gateway output values."""
        return ApiGatewayOutputs(
            api_endpoint=self.api.api_endpoint,
            api_id=self.api.id,
        )
