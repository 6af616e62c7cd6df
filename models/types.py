"""Type definitions for the Hue CLI.

Light and group data comes from the bridge's v1 API, which returns
resources as JSON objects keyed by ID. These classes hold the handful of
fields the CLI actually reads.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """User configuration loaded from config.toml."""
    username: str


@dataclass(frozen=True)
class Light:
    """A light known to the bridge.

    `on` is None when the bridge does not report a power state.
    """
    id: str
    name: str
    reachable: bool
    on: bool | None = None

    @classmethod
    def from_api(cls, light_id: str, data: dict) -> 'Light':
        """Build a Light from one entry of GET /lights.

        Raises:
            ValueError: If the entry or its state is not an object
        """
        if not isinstance(data, dict):
            raise ValueError(f"light {light_id}: expected an object, got {data!r}")
        state = data.get('state') or {}
        if not isinstance(state, dict):
            raise ValueError(f"light {light_id}: expected state object, got {state!r}")
        on = state.get('on')
        return cls(
            id=str(light_id),
            name=data.get('name', ''),
            reachable=bool(state.get('reachable', False)),
            on=bool(on) if on is not None else None,
        )


@dataclass(frozen=True)
class Group:
    """A group of lights (room, zone or light group)."""
    id: str
    name: str
    lights: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, group_id: str, data: dict) -> 'Group':
        if not isinstance(data, dict):
            raise ValueError(f"group {group_id}: expected an object, got {data!r}")
        lights = data.get('lights') or []
        if not isinstance(lights, list):
            raise ValueError(f"group {group_id}: expected list of lights, got {lights!r}")
        return cls(
            id=str(group_id),
            name=data.get('name', ''),
            lights=tuple(str(light_id) for light_id in lights),
        )


@dataclass(frozen=True)
class NewLight:
    """A light found by the most recent scan."""
    id: str
    name: str


@dataclass(frozen=True)
class NewLights:
    """Result of the most recent scan for new lights.

    last_scan is "active" while a scan is running, "none" if no scan has
    been run, or the timestamp of the last completed scan.
    """
    last_scan: str
    lights: tuple[NewLight, ...] = ()

    @classmethod
    def from_api(cls, data: dict) -> 'NewLights':
        lights = tuple(
            NewLight(id=str(light_id), name=info.get('name', ''))
            for light_id, info in data.items()
            if light_id != 'lastscan' and isinstance(info, dict)
        )
        return cls(last_scan=str(data.get('lastscan', 'none')), lights=lights)
