# Import API class and errors directly from the module
from .mailchimp_api import MailchimpAPI, datacenter_from_key, resolve_endpoint
from .errors import (
    MailchimpError,
    APIError,
    AuthenticationError,
    DecodeError,
    ResponseDecodeError,
    ErrorDecodeError,
    EncodeError,
    MissingIdentifierError,
)
from .resources import (
    Page,
    ListResource,
    MemberResource,
    CampaignResource,
    TemplateResource,
    email_to_member_id,
)

# Import the datatypes module so users can do `from mailchimp_python_api.datatypes import ...`
from . import datatypes

# Define the package version
# This is the single source of truth, read by setup.py and updated by bumpver.
__version__ = MailchimpAPI.VERSION

__all__ = [
    "MailchimpAPI",
    "datacenter_from_key",
    "resolve_endpoint",
    "email_to_member_id",
    "MailchimpError",
    "APIError",
    "AuthenticationError",
    "DecodeError",
    "ResponseDecodeError",
    "ErrorDecodeError",
    "EncodeError",
    "MissingIdentifierError",
    "Page",
    "ListResource",
    "MemberResource",
    "CampaignResource",
    "TemplateResource",
    "datatypes",  # Expose the datatypes module
    "__version__",
]
