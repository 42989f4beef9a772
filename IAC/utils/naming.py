"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'quotes', 'intake')

        Returns:
            Formatted resource name
        """
        return f"{self.project}-{self.environment}-{resource}"

    def queue_name(self, resource: str, dead_letter: bool = False) -> str:
        """
        Generate an SQS queue name.

        Args:
            resource: Queue identifier
            dead_letter: Append the dead-letter suffix

        Returns:
            Queue name (80 characters max on SQS)
        """
        name = self.name(resource)
        return f"{name}-dlq" if dead_letter else name

    def log_group_name(self, function_name: str) -> str:
        """Log group Lambda writes to for a given function name."""
        return f"/aws/lambda/{function_name}"
