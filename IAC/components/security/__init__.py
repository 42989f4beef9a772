"""
Security components for email identities and IAM.

Components:
- SesIdentitiesComponent: Verified sender and recipient identities
- IamRolesComponent: Least-privilege roles for intake and dispatcher
"""

from IAC.components.security.iam_roles import IamRolesComponent, IamRoleOutputs
from IAC.components.security.ses_identities import SesIdentitiesComponent, SesOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
    "SesIdentitiesComponent",
    "SesOutputs",
]
