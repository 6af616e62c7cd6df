"""
Authentication module for Hue Bridge.

Handles bridge discovery, choosing which bridge to talk to, and link button
registration of a new username.
"""

from collections.abc import Callable, Sequence
from ipaddress import IPv4Address, IPv6Address, ip_address

import click
import requests

from core.bridge import DEFAULT_TIMEOUT, bridge_api_url, parse_reply
from core.errors import BridgeError, DiscoveryError, RegistrationError

DISCOVERY_URL = 'https://discovery.meethue.com/'

# Client identifier sent as "devicetype" when registering
APP_NAME = 'hue#cli'

IpAddress = IPv4Address | IPv6Address


def discover_bridges() -> list[IpAddress]:
    """Discover Hue bridges on the network using N-UPnP.

    Uses the Philips discovery service at https://discovery.meethue.com/
    to find bridges on the same network.

    Returns:
        Bridge IP addresses, in the order the service returned them

    Raises:
        DiscoveryError: If the discovery service could not be queried
    """
    try:
        response = requests.get(DISCOVERY_URL, timeout=DEFAULT_TIMEOUT)
        response.raise_for_status()
        bridges = response.json()
    except requests.exceptions.HTTPError as e:
        if e.response is not None and e.response.status_code == 429:
            raise DiscoveryError(
                "Philips discovery service rate limit reached. "
                "Pass the bridge IP address instead, e.g. 'hue 192.168.1.2 list'."
            ) from e
        raise DiscoveryError(f"Bridge discovery failed: {e}") from e
    except requests.exceptions.RequestException as e:
        raise DiscoveryError(f"Bridge discovery failed: {e}") from e
    except ValueError as e:
        raise DiscoveryError(f"Failed to parse discovery response: {e}") from e

    if not isinstance(bridges, list):
        raise DiscoveryError(f"Failed to parse discovery response: {bridges!r}")

    addresses = []
    for bridge in bridges:
        raw = bridge.get('internalipaddress') if isinstance(bridge, dict) else None
        try:
            addresses.append(ip_address(raw))
        except ValueError:
            click.echo(f"Warning: ignoring bridge with invalid address: {bridge!r}", err=True)
    return addresses


def locate_bridge(ip_addr: IpAddress | None = None,
                  discover: Callable[[], Sequence[IpAddress]] | None = None) -> IpAddress:
    """Resolve the address of the bridge to talk to.

    An explicit address is used as-is. Otherwise discovery is run and the
    last address it returns is used.

    Args:
        ip_addr: Address given on the command line, if any
        discover: Discovery function returning candidate addresses
            (defaults to discover_bridges)

    Raises:
        DiscoveryError: If discovery fails or finds nothing
    """
    if ip_addr is not None:
        return ip_addr

    if discover is None:
        discover = discover_bridges

    addresses = discover()
    if not addresses:
        raise DiscoveryError("No bridge IP addresses found on the network")
    return addresses[-1]


def register_user(address: IpAddress, app_name: str = APP_NAME) -> str:
    """Create a new API username via link button authentication.

    The link button on the bridge must have been pressed shortly before
    this call.

    Args:
        address: Bridge IP address
        app_name: Application identifier (devicetype)

    Returns:
        The new username

    Raises:
        RegistrationError: If the bridge refused or could not be reached
    """
    operation = 'register user'
    try:
        response = requests.post(
            bridge_api_url(address),
            json={'devicetype': app_name},
            timeout=DEFAULT_TIMEOUT,
        )
        result = parse_reply(response, operation)
    except requests.exceptions.RequestException as e:
        raise RegistrationError(operation, str(e)) from e
    except BridgeError as e:
        raise RegistrationError(e.operation, e.detail, error_type=e.error_type) from e

    try:
        return result[0]['success']['username']
    except (IndexError, KeyError, TypeError) as e:
        raise RegistrationError(operation, f"unexpected reply: {result!r}") from e
