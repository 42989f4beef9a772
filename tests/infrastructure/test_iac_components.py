"""
Detailed tests for individual IAC components.

Validates:
1. Each component class has required attributes
2. Output dataclasses have required fields
3. Queue and IAM policy documents
4. Timeout relations and naming conventions
"""

import ast
import dataclasses
import json
from unittest.mock import MagicMock

import pytest

from IAC.configs.constants import API_THROTTLING, SQS_DEFAULTS
from IAC.configs.timeouts import validate_timeouts, visibility_timeout_for


class TestIacSyntaxValidation:
    """Validate Python syntax in all IAC modules."""

    def test_all_iac_files_have_valid_syntax(self, python_files_in_iac):
        """All Python files in IAC directory should parse without syntax errors."""
        errors = []
        for py_file in python_files_in_iac:
            try:
                ast.parse(py_file.read_text())
            except SyntaxError as e:
                errors.append(f"{py_file}: {e.msg} (line {e.lineno})")

        assert not errors, "Syntax errors found:\n" + "\n".join(errors)


class TestMessagingComponents:
    """Tests for the quote queues."""

    def test_sqs_component_attributes(self):
        """SqsQueuesComponent should expose get_outputs."""
        from IAC.components.messaging.sqs_queues import SqsQueuesComponent

        assert hasattr(SqsQueuesComponent, "get_outputs")

    def test_sqs_outputs_include_dlq(self):
        """SqsOutputs should include both queues."""
        from IAC.components.messaging.sqs_queues import SqsOutputs

        fields = {f.name for f in dataclasses.fields(SqsOutputs)}
        assert {"queue_url", "queue_arn", "dlq_url", "dlq_arn"} <= fields

    def test_redrive_policy_document(self):
        """Redrive policy should dead-letter after three receives."""
        from IAC.components.messaging.sqs_queues import redrive_policy_document

        policy = json.loads(redrive_policy_document("arn:aws:sqs:ap-southeast-2:1:dlq"))

        assert policy == {
            "deadLetterTargetArn": "arn:aws:sqs:ap-southeast-2:1:dlq",
            "maxReceiveCount": 3,
        }

    def test_queue_defaults(self):
        """Lease is six dispatcher timeouts; DLQ outlives the main queue."""
        assert SQS_DEFAULTS["visibility_timeout_seconds"] == 180
        assert SQS_DEFAULTS["message_retention_seconds"] == 7 * 24 * 3600
        assert SQS_DEFAULTS["dlq_message_retention_seconds"] == 14 * 24 * 3600


class TestSecurityComponents:
    """Tests for SES identities and IAM roles."""

    def test_ses_outputs(self):
        """SesOutputs should include both identity ARNs."""
        from IAC.components.security.ses_identities import SesOutputs

        fields = {f.name for f in dataclasses.fields(SesOutputs)}
        assert fields == {"sender_identity_arn", "recipient_identity_arn"}

    def test_iam_outputs(self):
        """IamRoleOutputs should include one role per Lambda."""
        from IAC.components.security.iam_roles import IamRoleOutputs

        fields = {f.name for f in dataclasses.fields(IamRoleOutputs)}
        assert fields == {"intake_role_arn", "dispatcher_role_arn"}

    def test_intake_policy_only_sends(self):
        """Intake role may only send to the quote queue."""
        from IAC.components.security.iam_roles import intake_policy_document

        policy = json.loads(intake_policy_document("arn:queue"))

        [statement] = policy["Statement"]
        assert statement["Action"] == ["sqs:SendMessage"]
        assert statement["Resource"] == ["arn:queue"]

    def test_dispatcher_policy_scopes_email_to_identities(self):
        """Dispatcher role may consume the queue and send from the identities only."""
        from IAC.components.security.iam_roles import dispatcher_policy_document

        policy = json.loads(
            dispatcher_policy_document("arn:queue", ["arn:sender", "arn:sender", "arn:rep"])
        )

        sqs_statement, ses_statement = policy["Statement"]
        assert "sqs:ChangeMessageVisibility" in sqs_statement["Action"]
        assert sqs_statement["Resource"] == ["arn:queue"]
        assert ses_statement["Action"] == ["ses:SendEmail", "ses:SendRawEmail"]
        assert ses_statement["Resource"] == ["arn:rep", "arn:sender"]


class TestComputeAndEdgeComponents:
    """Tests for the Lambdas and the HTTP API."""

    def test_lambda_outputs_include_invoke_arn(self):
        """LambdaOutputs should expose the invoke ARN for the API integration."""
        from IAC.components.compute.lambda_function import LambdaOutputs

        fields = {f.name for f in dataclasses.fields(LambdaOutputs)}
        assert {"function_arn", "function_name", "invoke_arn"} <= fields

    def test_api_gateway_outputs(self):
        """ApiGatewayOutputs should export the endpoint for the site build."""
        from IAC.components.edge.api_gateway import ApiGatewayOutputs, QUOTE_ROUTE_KEY

        fields = {f.name for f in dataclasses.fields(ApiGatewayOutputs)}
        assert "api_endpoint" in fields
        assert QUOTE_ROUTE_KEY == "POST /quote"

    def test_throttling_limits(self):
        """Stage throttling should allow bursts of 50 at 25 requests/second."""
        assert API_THROTTLING == {"burst_limit": 50, "rate_limit": 25}


class TestTimeouts:
    """Timeout relations enforced before deployment."""

    def test_default_configuration_is_valid(self, stack_config):
        """Default timeouts should produce the 180s lease."""
        assert validate_timeouts(stack_config) == 180

    def test_lease_scales_with_dispatcher_timeout(self, stack_config):
        """Lease should track the dispatcher timeout."""
        config = dataclasses.replace(stack_config, dispatcher_timeout=60)

        assert visibility_timeout_for(config) == 360

    def test_intake_timeout_over_gateway_limit(self, stack_config):
        """Intake timeout cannot exceed the API Gateway integration limit."""
        config = dataclasses.replace(stack_config, intake_timeout=45)

        with pytest.raises(ValueError, match="intake_timeout"):
            validate_timeouts(config)

    def test_lease_over_sqs_maximum(self, stack_config):
        """Lease cannot exceed the SQS visibility timeout maximum."""
        config = dataclasses.replace(stack_config, dispatcher_timeout=30000)

        with pytest.raises(ValueError):
            validate_timeouts(config)


class TestUtils:
    """Naming and tagging helpers."""

    def test_resource_names(self):
        from IAC.utils.naming import ResourceNamer

        namer = ResourceNamer(project="quote-pipeline", environment="dev")

        assert namer.name("intake") == "quote-pipeline-dev-intake"
        assert namer.queue_name("quotes", dead_letter=True) == "quote-pipeline-dev-quotes-dlq"
        assert namer.log_group_name("fn") == "/aws/lambda/fn"

    def test_tags_include_stage(self):
        from IAC.utils.tags import create_tags

        tags = create_tags("dev", "quotes-queue", stage="queue")

        assert tags["Project"] == "quote-pipeline"
        assert tags["Environment"] == "dev"
        assert tags["PipelineStage"] == "queue"


class TestStackConfig:
    """Loading the Pulumi stack configuration."""

    STACK_VALUES = {
        "environment": "dev",
        "sales_rep_email": "sales@example.com",
        "sender_email": "quotes@example.com",
        "allowed_origins": "https://www.example.com, https://example.com",
    }

    def _stack_config(self, monkeypatch, values):
        from IAC.configs import environment

        config = MagicMock()
        config.require.side_effect = lambda key: values[key]
        config.get.side_effect = values.get
        monkeypatch.setattr(environment.pulumi, "Config", lambda: config)
        return config

    def test_allowed_origins_are_required(self, monkeypatch):
        """allowed_origins should be read with require, not get."""
        from IAC.configs.environment import get_config

        config = self._stack_config(monkeypatch, dict(self.STACK_VALUES))

        env = get_config()

        config.require.assert_any_call("allowed_origins")
        assert env.allowed_origins == ["https://www.example.com", "https://example.com"]

    def test_missing_allowed_origins(self, monkeypatch):
        """A stack without allowed_origins should fail to load."""
        from IAC.configs.environment import get_config

        values = dict(self.STACK_VALUES)
        del values["allowed_origins"]
        self._stack_config(monkeypatch, values)

        with pytest.raises(KeyError):
            get_config()

    def test_blank_allowed_origins(self, monkeypatch):
        """A stack listing no origin should fail to load."""
        from IAC.configs.environment import get_config

        self._stack_config(monkeypatch, {**self.STACK_VALUES, "allowed_origins": " , "})

        with pytest.raises(ValueError, match="allowed_origins"):
            get_config()
