"""
Python client for interacting with the Dribbble v2 REST API.

This package provides a `DribbbleClient` class that helps with the
OAuth2 authorization-code flow against Dribbble and exposes one method
per API endpoint.  Keys are converted transparently: requests are sent
in ``snake_case`` and responses come back in ``camelCase``.

Examples
--------

```python
from dribbble_api_client import DribbbleClient, Pager, Scope

client = DribbbleClient(
    client_id="YOUR_CLIENT_ID",
    client_secret="YOUR_CLIENT_SECRET",
    scope=Scope.UPLOAD,
)

# Redirect the user here, then exchange the code Dribbble sends back
print(client.get_authorization_url(redirect_uri="https://example.com/cb"))

token = client.exchange_authorization_code("CODE_FROM_REDIRECT")
client.set_access_token(token["accessToken"])

profile = client.get_profile()
popular = client.get_popular_shots(Pager(page=1, per_page=24))
```

See Also
--------
The Dribbble developer documentation (https://developer.dribbble.com/v2/)
describes registering an application and lists the available endpoints.
"""

__version__ = "0.1.0"

from .casing import from_wire_format, to_wire_format
from .client import ClientConfig, DribbbleClient
from .exceptions import DribbbleError, DribbbleUnauthorizedError
from .types import Pager, Scope

__all__ = [
    "DribbbleClient",
    "ClientConfig",
    "DribbbleError",
    "DribbbleUnauthorizedError",
    "Pager",
    "Scope",
    "to_wire_format",
    "from_wire_format",
]
