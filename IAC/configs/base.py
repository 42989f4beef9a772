"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        sales_rep_email: Recipient of quote notifications (verified SES identity)
        sender_email: Sender of quote notifications (verified SES identity)
        allowed_origins: Site origins allowed to call POST /quote
        lambda_memory: Lambda function memory in MB
        intake_timeout: Intake Lambda timeout in seconds
        dispatcher_timeout: Dispatcher Lambda timeout in seconds
        code_path: Directory packaged as the Lambda deployment archive
    """
    environment: str
    sales_rep_email: str
    sender_email: str
    allowed_origins: list[str] = field(default_factory=list)
    lambda_memory: int = 256
    intake_timeout: int = 10
    dispatcher_timeout: int = 30
    code_path: str = "./build/lambda"

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    def get_tags(self) -> dict[str, str]:
        """Get environment-specific tags."""
        return {
            "Environment": self.environment,
        }
