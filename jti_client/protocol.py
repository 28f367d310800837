"""Helpers around the generated ``telemetry`` bindings from ``agent.proto``.

Message classes and the ``OpenConfigTelemetryStub`` live in :mod:`agent_pb2`
and :mod:`agent_pb2_grpc`. This module adds request builders, ``KeyValue``
decoding and a ``VerbosityLevel`` that can be parsed from configuration.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Iterable

from . import agent_pb2

SERVICE = agent_pb2.DESCRIPTOR.services_by_name["OpenConfigTelemetry"].full_name

TELEMETRY_SUBSCRIBE = f"/{SERVICE}/telemetrySubscribe"
GET_OPERATIONAL_STATE = f"/{SERVICE}/getTelemetryOperationalState"


class VerbosityLevel(IntEnum):
    """Output verbosity of ``getTelemetryOperationalState``."""

    DETAIL = agent_pb2.DETAIL
    TERSE = agent_pb2.TERSE
    BRIEF = agent_pb2.BRIEF

    @classmethod
    def parse(cls, value: str) -> "VerbosityLevel":
        try:
            return cls[value.strip().upper()]
        except KeyError:
            choices = ", ".join(level.name.lower() for level in cls)
            raise ValueError(f"Unknown verbosity {value!r} (expected one of: {choices})") from None


def decode_value(kv: agent_pb2.KeyValue) -> Any:
    """Return the populated member of a ``KeyValue`` oneof, or None."""

    which = kv.WhichOneof("value")
    if which is None:
        return None
    return getattr(kv, which)


def key_values_to_dict(kvs: Iterable[agent_pb2.KeyValue]) -> Dict[str, Any]:
    """Flatten a repeated ``KeyValue`` field; later keys win."""

    return {kv.key: decode_value(kv) for kv in kvs}


def build_subscription_request(
    paths: Iterable[tuple[str, int]],
    *,
    limit_records: int = 0,
    limit_time_seconds: int = 0,
    need_eos: bool = False,
) -> agent_pb2.SubscriptionRequest:
    """Build a ``SubscriptionRequest`` for ``(path, sample_frequency_ms)`` pairs."""

    request = agent_pb2.SubscriptionRequest()
    for path, frequency in paths:
        request.path_list.add(path=path, sample_frequency=frequency)

    if limit_records or limit_time_seconds or need_eos:
        request.additional_config.CopyFrom(
            agent_pb2.SubscriptionAdditionalConfig(
                limit_records=limit_records,
                limit_time_seconds=limit_time_seconds,
                need_eos=need_eos,
            )
        )
    return request


def build_operational_state_request(
    subscription_id: int, verbosity: VerbosityLevel
) -> agent_pb2.GetOperationalStateRequest:
    return agent_pb2.GetOperationalStateRequest(
        subscription_id=subscription_id, verbosity=int(verbosity)
    )
