from __future__ import annotations

import socket
import threading
import time
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Callable, Dict, List, Optional

import pytest

from liqpay_client import ClientConfig, HashAlgorithm, LiqPayRequest, binds
from liqpay_client.schemas import StatusResponse

PRIVATE_KEY = "secret"
PUBLIC_KEY = "sandbox_public"


@binds(StatusResponse, HashAlgorithm.SHA3_256)
class OrderRequest(LiqPayRequest[StatusResponse]):
    order_id: str
    amount: float


@dataclass
class RecordedRequest:
    path: str
    headers: Dict[str, str]
    body: str


@dataclass
class GatewayStub:
    url: str
    status: int = 200
    body: str = '{"result":"ok","status":"success"}'
    content_type: str = "application/json"
    delay: float = 0.0
    # builds the reply from the posted form body, overriding `body`
    responder: Optional[Callable[[str], str]] = None
    requests: List[RecordedRequest] = field(default_factory=list)


class _GatewayHandler(BaseHTTPRequestHandler):
    def do_POST(self) -> None:
        stub: GatewayStub = self.server.stub  # type: ignore[attr-defined]
        length = int(self.headers.get("Content-Length", "0"))
        body = self.rfile.read(length).decode("utf-8")
        stub.requests.append(
            RecordedRequest(path=self.path, headers=dict(self.headers), body=body)
        )
        if stub.delay:
            time.sleep(stub.delay)
        reply = stub.responder(body) if stub.responder else stub.body
        payload = reply.encode("utf-8")
        self.send_response(stub.status)
        self.send_header("Content-Type", stub.content_type)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format: str, *args) -> None:
        pass


class _QuietServer(ThreadingHTTPServer):
    daemon_threads = True

    def handle_error(self, request, client_address) -> None:
        # cancelled clients hang up mid-response
        pass


@pytest.fixture
def gateway_stub():
    server = _QuietServer(("127.0.0.1", 0), _GatewayHandler)
    host, port = server.server_address[:2]
    stub = GatewayStub(url=f"http://{host}:{port}/api/request")
    server.stub = stub  # type: ignore[attr-defined]
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield stub
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def stub_config(gateway_stub: GatewayStub) -> ClientConfig:
    return ClientConfig(
        public_key=PUBLIC_KEY,
        private_key=PRIVATE_KEY,
        api_url=gateway_stub.url,
        timeout_seconds=5,
    )


@pytest.fixture
def unreachable_config() -> ClientConfig:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return ClientConfig(
        public_key=PUBLIC_KEY,
        private_key=PRIVATE_KEY,
        api_url=f"http://127.0.0.1:{port}/api/request",
        timeout_seconds=5,
    )
