"""
gRPC server construction.

Registers :class:`PatientsServicer` under ``healthvoice.v1.Patients`` using
generic method handlers over the protobuf messages in :mod:`.messages`.
"""

import logging
from functools import partial

import grpc
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from patient_records.core.interfaces.clock import IClock
from patient_records.infrastructure.persistence.sqlalchemy.unit_of_work.unit_of_work import (
    SQLAlchemyUnitOfWork,
)
from patient_records.presentation.grpc_api.messages import RPCS, SERVICE_NAME, rpc_types
from patient_records.presentation.grpc_api.patients_service import PatientsServicer

logger = logging.getLogger(__name__)


def build_generic_handler(servicer: PatientsServicer) -> grpc.GenericRpcHandler:
    handlers = {}
    for method in RPCS:
        request_type, response_type = rpc_types(method)
        handlers[method] = grpc.unary_unary_rpc_method_handler(
            getattr(servicer, method),
            request_deserializer=request_type.FromString,
            response_serializer=response_type.SerializeToString,
        )
    return grpc.method_handlers_generic_handler(SERVICE_NAME, handlers)


def create_grpc_server(
    session_factory: async_sessionmaker[AsyncSession],
    clock: IClock,
    address: str,
) -> tuple[grpc.aio.Server, int]:
    """
    Build (but do not start) the gRPC server.

    Args:
        session_factory: Source of sessions for per-RPC units of work
        clock: Time source for the patient service
        address: ``host:port`` to listen on; port 0 picks a free port

    Returns:
        The server and the port it is bound to
    """
    servicer = PatientsServicer(partial(SQLAlchemyUnitOfWork, session_factory), clock)
    server = grpc.aio.server()
    server.add_generic_rpc_handlers((build_generic_handler(servicer),))
    port = server.add_insecure_port(address)
    logger.info(f"gRPC service {SERVICE_NAME} bound to port {port}")
    return server, port
