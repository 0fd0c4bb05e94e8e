"""
Minimal async client for the ``healthvoice.v1.Patients`` service.

Exposes the same callables a stub generated from ``protos/patients.proto``
would, one per RPC.
"""

import grpc

from patient_records.presentation.grpc_api.messages import RPCS, SERVICE_NAME, rpc_types


class PatientsStub:
    """Client-side callables for each RPC on an open channel."""

    def __init__(self, channel: grpc.aio.Channel):
        for method in RPCS:
            request_type, response_type = rpc_types(method)
            setattr(
                self,
                method,
                channel.unary_unary(
                    f"/{SERVICE_NAME}/{method}",
                    request_serializer=request_type.SerializeToString,
                    response_deserializer=response_type.FromString,
                ),
            )
