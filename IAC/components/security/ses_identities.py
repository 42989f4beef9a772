"""
SES identities component for notification email.

Creates:
- Sender email identity (From address of quote notifications)
- Sales rep email identity (recipient; required while SES is in sandbox)

Both identities stay pending until the owner clicks the verification link
SES sends to each address.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws


@dataclass
class SesOutputs:
    """Output values from SES identities component."""
    sender_identity_arn: pulumi.Output[str]
    recipient_identity_arn: pulumi.Output[str]


class SesIdentitiesComponent(pulumi.ComponentResource):
    """Verified email identities used by the dispatcher."""

    def __init__(
        self,
        name: str,
        sender_email: str,
        sales_rep_email: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:SesIdentities", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.sender_identity = aws.ses.EmailIdentity(
            f"{name}-sender-identity",
            email=sender_email,
            opts=child_opts,
        )

        # Same address for both roles needs a single identity
        if sales_rep_email == sender_email:
            self.recipient_identity = self.sender_identity
        else:
            self.recipient_identity = aws.ses.EmailIdentity(
                f"{name}-recipient-identity",
                email=sales_rep_email,
                opts=child_opts,
            )

        self.register_outputs({
            "sender_identity_arn": self.sender_identity.arn,
            "recipient_identity_arn": self.recipient_identity.arn,
        })

    def get_outputs(self) -> SesOutputs:
        """Get SES identity output values."""
        return SesOutputs(
            sender_identity_arn=self.sender_identity.arn,
            recipient_identity_arn=self.recipient_identity.arn,
        )
