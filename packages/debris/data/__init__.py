"""Telemetry source connectors feeding the analytics core."""

from .spacetrack import (
    SpaceTrackConnector,
    altitude_from_mean_motion,
    filter_by_altitude,
)

__all__ = [
    "SpaceTrackConnector",
    "altitude_from_mean_motion",
    "filter_by_altitude",
]
