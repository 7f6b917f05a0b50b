"""
Client implementation for the Dribbble v2 REST API.

This module defines the :class:`DribbbleClient` class which walks a
caller through the OAuth2 authorization-code flow and then performs
HTTP requests against the Dribbble API endpoints.  Request bodies and
query parameters are converted to ``snake_case`` before they are sent,
and response objects are converted back to ``camelCase`` before they
are returned.

Usage
-----

.. code-block:: python

    from dribbble_api_client import DribbbleClient, Pager, Scope

    client = DribbbleClient(
        client_id="abc123",
        client_secret="shhsecret",
        scope=Scope.PUBLIC,
    )

    # 1. Send the user to Dribbble
    url = client.get_authorization_url(redirect_uri="https://app/cb", state="xyz")

    # 2. Dribbble redirects back with ?code=...
    token = client.exchange_authorization_code(code, redirect_uri="https://app/cb")

    # 3. Install the token and call protected endpoints
    client.set_access_token(token["accessToken"])
    shots = client.get_user_shots(Pager(page=1, per_page=12))

The client does not store, refresh or persist tokens.  Keeping the
token between sessions is the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote, urlencode

import requests

from . import __version__
from .casing import from_wire_format, to_wire_format
from .exceptions import DribbbleUnauthorizedError
from .types import Pager, PagerLike, Scope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """Settings resolved when a :class:`DribbbleClient` is created."""

    client_id: str
    client_secret: str
    scope: Scope
    api_url: str
    oauth_url: str
    timeout: Optional[float] = None


class DribbbleClient:
    """A thin client for the Dribbble REST API.

    Parameters
    ----------
    client_id : str
        Your Dribbble OAuth application identifier.
    client_secret : str
        Your Dribbble OAuth application secret.
    scope : Scope or str
        Default scope requested by :meth:`get_authorization_url`.
        Either ``"public"`` or ``"upload"``.
    api_url : str, optional
        Override the API base URL.
    oauth_url : str, optional
        Override the OAuth base URL.  The authorization page and token
        endpoint are both derived from it.
    timeout : float, optional
        Timeout in seconds forwarded to every HTTP request.  ``None``
        leaves the transport's own behaviour in place.
    session : requests.Session, optional
        Session used for every request.  When omitted the client creates
        and owns one.  A caller-supplied session is never closed by the
        client.

    Notes
    -----
    Endpoint methods marked as protected raise
    :class:`~dribbble_api_client.exceptions.DribbbleUnauthorizedError`
    before any network traffic when no access token has been installed
    with :meth:`set_access_token`.  Errors from the transport itself
    (``requests.ConnectionError``, ``requests.HTTPError`` and friends)
    are propagated unchanged.
    """

    DEFAULT_API_URL = "https://api.dribbble.com/v2"
    DEFAULT_OAUTH_URL = "https://dribbble.com/oauth"

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        scope: Union[Scope, str],
        api_url: Optional[str] = None,
        oauth_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not client_id:
            raise ValueError("client_id must be provided")
        if not client_secret:
            raise ValueError("client_secret must be provided")
        try:
            scope = Scope(scope)
        except ValueError:
            raise ValueError(
                "scope must be one of %s, got %r"
                % (", ".join(s.value for s in Scope), scope)
            ) from None

        self.config = ClientConfig(
            client_id=client_id,
            client_secret=client_secret,
            scope=scope,
            api_url=(api_url or self.DEFAULT_API_URL).rstrip("/"),
            oauth_url=(oauth_url or self.DEFAULT_OAUTH_URL).rstrip("/"),
            timeout=timeout,
        )

        self._access_token = ""
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({
            "User-Agent": f"dribbble-api-client/{__version__}",
            "Accept": "application/json",
        })

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    @property
    def access_token(self) -> str:
        """The installed access token, or an empty string."""
        return self._access_token

    @property
    def is_authorized(self) -> bool:
        return bool(self._access_token)

    def _enforce_authorized(self) -> None:
        """Raise :class:`DribbbleUnauthorizedError` if no token is set."""
        if not self._access_token:
            raise DribbbleUnauthorizedError()

    def get_authorization_url(
        self,
        scope: Optional[Union[Scope, str]] = None,
        redirect_uri: Optional[str] = None,
        state: Optional[str] = None,
    ) -> str:
        """Return the Dribbble authorization URL to redirect the user to.

        Parameters
        ----------
        scope : Scope or str, optional
            Scope to request.  Defaults to the client's configured scope.
        redirect_uri : str, optional
            Where Dribbble sends the user back to.  Omitted when empty.
        state : str, optional
            Opaque value echoed back by Dribbble.  Omitted when empty.

        Returns
        -------
        str
            A fully qualified ``.../oauth/authorize`` URL.  No request is
            made.
        """
        query = to_wire_format({
            "clientId": self.config.client_id,
            "scope": str(scope or self.config.scope),
            "redirectUri": redirect_uri,
            "state": state,
        })
        return f"{self.config.oauth_url}/authorize?{urlencode(query, quote_via=quote)}"

    def exchange_authorization_code(
        self, code: str, redirect_uri: Optional[str] = None
    ) -> Any:
        """Exchange an authorization ``code`` for an access token.

        The token is not installed on the client; pass the returned
        ``accessToken`` to :meth:`set_access_token` yourself.

        Returns
        -------
        dict
            The token response with camel-cased keys, typically
            ``accessToken``, ``tokenType``, ``scope`` and ``createdAt``.
        """
        return self._request(
            "POST",
            f"{self.config.oauth_url}/token",
            data={
                "clientId": self.config.client_id,
                "clientSecret": self.config.client_secret,
                "code": code,
                "redirectUri": redirect_uri,
            },
        )

    def set_access_token(self, access_token: str) -> None:
        """Install ``access_token`` for every subsequent request.

        Calling it again replaces the previous token.  Requests already
        in flight keep the header they were sent with.
        """
        self._access_token = access_token
        self.session.headers["Authorization"] = f"Bearer {access_token}"
        logger.info("Access token installed")

    # ------------------------------------------------------------------
    # HTTP request helpers
    # ------------------------------------------------------------------
    def _prepare_url(self, path: str) -> str:
        """Build the full request URL from a relative or absolute path."""
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.config.api_url}/{path.lstrip('/')}"

    @staticmethod
    def _path(template: str, *ids: Any) -> str:
        """Fill ``template`` with percent-escaped identifiers."""
        return template.format(*(quote(str(i), safe="") for i in ids))

    @staticmethod
    def _query(pager: Optional[PagerLike]) -> Optional[Dict[str, Any]]:
        if pager is None:
            return None
        if isinstance(pager, Pager):
            pager = {"page": pager.page, "perPage": pager.per_page}
        return to_wire_format(pager)

    @staticmethod
    def _form(data: Mapping[str, Any]) -> Dict[str, Any]:
        """Wire-format ``data`` for a form body, booleans as ``true``/``false``."""
        return {
            key: (str(value).lower() if isinstance(value, bool) else value)
            for key, value in to_wire_format(data).items()
        }

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform an HTTP request against the Dribbble API.

        Parameters
        ----------
        method : str
            The HTTP verb, such as ``"GET"``, ``"POST"`` or ``"DELETE"``.
        path : str
            The endpoint path relative to the API base URL.  Absolute URLs
            are used as-is.
        params : dict, optional
            Query parameters, already in wire format.
        data : mapping, optional
            Form body.  It is converted with :func:`to_wire_format` and
            sent ``application/x-www-form-urlencoded``.
        files : dict, optional
            Binary parts sent as ``multipart/form-data``.

        Returns
        -------
        Any
            Decoded JSON objects with camel-cased top-level keys, a list
            of such objects for JSON arrays, ``{}`` for an empty body, or
            the response text for non-JSON content.

        Raises
        ------
        requests.RequestException
            Any transport failure or non-2xx status, unchanged.
        """
        url = self._prepare_url(path)
        body = self._form(data) if data is not None else None

        logger.debug("Request: %s %s", method, url)
        response = self.session.request(
            method=method,
            url=url,
            params=params,
            data=body,
            files=files,
            timeout=self.config.timeout,
        )
        logger.debug("Response: %s %s -> %d", method, url, response.status_code)
        response.raise_for_status()

        return self._decode(response)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return {}
        content_type = response.headers.get("Content-Type", "").lower()
        if "json" not in content_type:
            return response.text
        payload = response.json()
        if isinstance(payload, dict):
            return from_wire_format(payload)
        if isinstance(payload, list):
            return [
                from_wire_format(item) if isinstance(item, dict) else item
                for item in payload
            ]
        return payload

    def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "DribbbleClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------
    def create_attachment(self, shot_id: Any, file: bytes) -> Any:
        """Upload an attachment to shot ``shot_id``.

        ``file`` is sent untouched as the multipart ``file`` part.
        Dribbble limits attachments to 10MB.
        """
        self._enforce_authorized()
        return self._request(
            "POST",
            self._path("shots/{}/attachments", shot_id),
            files={"file": file},
        )

    def delete_attachment(self, shot_id: Any, attachment_id: Any) -> Any:
        """Delete attachment ``attachment_id`` of shot ``shot_id``."""
        self._enforce_authorized()
        return self._request(
            "DELETE", self._path("shots/{}/attachments/{}", shot_id, attachment_id)
        )

    # ------------------------------------------------------------------
    # Likes
    # ------------------------------------------------------------------
    def get_likes(self, pager: Optional[PagerLike] = None) -> Any:
        """List the authenticated user's liked shots."""
        self._enforce_authorized()
        return self._request("GET", "user/likes", params=self._query(pager))

    def has_liked(self, shot_id: Any) -> Any:
        """Check whether the authenticated user likes shot ``shot_id``."""
        self._enforce_authorized()
        return self._request("GET", self._path("shots/{}/like", shot_id))

    def like_shot(self, shot_id: Any) -> Any:
        self._enforce_authorized()
        return self._request("POST", self._path("shots/{}/like", shot_id))

    def unlike_shot(self, shot_id: Any) -> Any:
        # Unguarded: the server answers 401 itself when no token is sent.
        return self._request("DELETE", self._path("shots/{}/like", shot_id))

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def get_user_project(self, pager: Optional[PagerLike] = None) -> Any:
        """List the authenticated user's projects."""
        self._enforce_authorized()
        return self._request("GET", "user/project", params=self._query(pager))

    def create_project(self, name: str, description: Optional[str] = None) -> Any:
        self._enforce_authorized()
        return self._request(
            "POST", "projects", data={"name": name, "description": description}
        )

    def update_project(self, project_id: Any, data: Mapping[str, Any]) -> Any:
        """Update project ``project_id`` with ``data`` (``name``, ``description``)."""
        self._enforce_authorized()
        return self._request("POST", self._path("projects/{}", project_id), data=data)

    def delete_project(self, project_id: Any) -> Any:
        self._enforce_authorized()
        return self._request("DELETE", self._path("projects/{}", project_id))

    # ------------------------------------------------------------------
    # Shots
    # ------------------------------------------------------------------
    def get_user_shots(self, pager: Optional[PagerLike] = None) -> Any:
        """List the authenticated user's shots."""
        self._enforce_authorized()
        return self._request("GET", "user/shots", params=self._query(pager))

    def get_popular_shots(self, pager: Optional[PagerLike] = None) -> Any:
        """List currently popular shots.  No token required."""
        return self._request("GET", "popular_shots", params=self._query(pager))

    def get_shot(self, shot_id: Any) -> Any:
        """Get shot ``shot_id``.  No token required."""
        return self._request("GET", self._path("shots/{}", shot_id))

    def create_shot(self, data: Mapping[str, Any]) -> Any:
        """Create a shot from ``data`` (camel- or snake-cased keys)."""
        self._enforce_authorized()
        return self._request("POST", "shots", data=data)

    def update_shot(self, shot_id: Any, data: Mapping[str, Any]) -> Any:
        self._enforce_authorized()
        return self._request("POST", self._path("shots/{}", shot_id), data=data)

    def delete_shot(self, shot_id: Any) -> Any:
        self._enforce_authorized()
        return self._request("DELETE", self._path("shots/{}", shot_id))

    # ------------------------------------------------------------------
    # User
    # ------------------------------------------------------------------
    def get_profile(self) -> Any:
        """Get the authenticated user's profile."""
        self._enforce_authorized()
        return self._request("GET", "user")
