from .base import EndpointGroup
from .codes_of_conduct import CodesOfConductClient
from .emojis import EmojisClient
from .gitignore import GitignoreClient
from .licenses import LicensesClient
from .meta import MetaClient
from .rate_limit import RateLimitClient

__all__ = [
    "CodesOfConductClient",
    "EmojisClient",
    "EndpointGroup",
    "GitignoreClient",
    "LicensesClient",
    "MetaClient",
    "RateLimitClient",
]
