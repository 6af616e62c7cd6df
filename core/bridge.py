"""HueBridge class for talking to a Hue Bridge.

Wraps the bridge's CLIP v1 API (http://<bridge>/api/<username>/...).
Every call is a single blocking request; failures raise BridgeError.
"""

from ipaddress import IPv4Address, IPv6Address, ip_address

import click
import requests

from core.errors import BridgeError
from models.types import Group, Light, NewLights

DEFAULT_TIMEOUT = 5


def bridge_api_url(address: IPv4Address | IPv6Address | str) -> str:
    """Return the v1 API root URL for a bridge address."""
    address = ip_address(str(address))
    host = f"[{address}]" if address.version == 6 else str(address)
    return f"http://{host}/api"


def parse_reply(response: requests.Response, operation: str):
    """Decode a bridge reply and raise BridgeError on any reported failure.

    The bridge reports errors with HTTP 200 and a body like
    [{"error": {"type": 1, "address": "/lights", "description": "unauthorized user"}}].
    """
    try:
        response.raise_for_status()
        result = response.json()
    except requests.exceptions.HTTPError as e:
        raise BridgeError(operation, str(e)) from e
    except ValueError as e:
        raise BridgeError(operation, f"invalid JSON in reply: {e}") from e

    if isinstance(result, list):
        for item in result:
            if isinstance(item, dict) and 'error' in item:
                error = item['error']
                raise BridgeError(
                    operation,
                    error.get('description', 'unknown error'),
                    error_type=error.get('type'),
                )
    return result


class HueBridge:
    """A session with one bridge, authenticated by username."""

    def __init__(self, address: IPv4Address | IPv6Address | str, username: str,
                 session: requests.Session | None = None,
                 timeout: float = DEFAULT_TIMEOUT, verbose: bool = False):
        """Initialise HueBridge.

        Args:
            address: Bridge IP address
            username: API username obtained from 'register'
            session: HTTP session to use (a new one if not provided)
            timeout: Per-request timeout in seconds
            verbose: If True, echo each request to stderr
        """
        self.address = ip_address(str(address))
        self.username = username
        self.base_url = f"{bridge_api_url(self.address)}/{username}"
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.verbose = verbose

    def _request(self, method: str, endpoint: str, operation: str, data: dict | None = None):
        """Make a request to the bridge and return the decoded reply."""
        url = f"{self.base_url}{endpoint}"
        if self.verbose:
            click.secho(f"{method} {endpoint or '/'}", fg='blue', err=True)

        try:
            response = self.session.request(method, url, json=data, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise BridgeError(operation, f"request to bridge at {self.address} timed out") from e
        except requests.exceptions.RequestException as e:
            raise BridgeError(operation, str(e)) from e

        return parse_reply(response, operation)

    def _get_resources(self, endpoint: str, operation: str) -> dict:
        """GET a resource collection, which the bridge returns as a dict keyed by ID."""
        result = self._request('GET', endpoint, operation)
        if not isinstance(result, dict):
            raise BridgeError(operation, f"unexpected reply: {result!r}")
        return result

    def get_all_lights(self) -> list[Light]:
        """Get every light known to the bridge."""
        operation = 'get all lights'
        result = self._get_resources('/lights', operation)
        try:
            return [Light.from_api(light_id, data) for light_id, data in result.items()]
        except ValueError as e:
            raise BridgeError(operation, f"unexpected reply: {e}") from e

    def get_all_groups(self) -> list[Group]:
        """Get every group known to the bridge."""
        operation = 'get all groups'
        result = self._get_resources('/groups', operation)
        try:
            return [Group.from_api(group_id, data) for group_id, data in result.items()]
        except ValueError as e:
            raise BridgeError(operation, f"unexpected reply: {e}") from e

    def search_new_lights(self) -> None:
        """Start a search for new lights. The bridge scans for about 40 seconds."""
        self._request('POST', '/lights', 'search for new lights')

    def get_new_lights(self) -> NewLights:
        """Get the lights found by the most recent search."""
        result = self._get_resources('/lights/new', 'get new lights')
        return NewLights.from_api(result)

    def set_light_state(self, light_id: str, *, on: bool | None = None) -> None:
        """Set the state of a light. Only attributes that are not None are sent."""
        state = {}
        if on is not None:
            state['on'] = on
        self._request('PUT', f'/lights/{light_id}/state', f'set state of light {light_id}', state)

    def set_light_attribute(self, light_id: str, *, name: str | None = None) -> None:
        """Set attributes of a light (currently just its name)."""
        attributes = {}
        if name is not None:
            attributes['name'] = name
        self._request('PUT', f'/lights/{light_id}', f'set attributes of light {light_id}', attributes)
