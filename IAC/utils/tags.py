"""
Tag factory for AWS resources.

Every resource carries the project tags plus its environment, name and,
where given, the pipeline stage it belongs to.
"""

from IAC.configs.constants import DEFAULT_TAGS


def create_tags(
    environment: str,
    resource_name: str,
    stage: str | None = None,
    **extra_tags: str,
) -> dict[str, str]:
    """
    Create a standard tag set for an AWS resource.

    Args:
        environment: Deployment environment
        resource_name: Name of the resource
        stage: Pipeline stage (intake, queue, dispatch)
        **extra_tags: Additional tags to include

    Returns:
        Dictionary of tags
    """
    tags = {
        **DEFAULT_TAGS,
        "Environment": environment,
        "Name": resource_name,
    }
    if stage:
        tags["PipelineStage"] = stage
    tags.update(extra_tags)
    return tags
