"""Test fixtures — generated client certificates, settings and a fake DocMan API."""

import json
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import httpx
import pytest
import pytest_asyncio
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import pkcs12
from cryptography.x509.oid import NameOID

from docman_client.config import Settings, endpoint_keys
from docman_client.credentials import PasswordEncryption
from docman_client.registration import register_services
from docman_client.schemas import NIL_UUID

CERT_PASSWORD = "s3cret"
ENCRYPTION_KEY = "unit-test-encryption-key"
BASE_URL = "https://docman.test"


@pytest.fixture(scope="session")
def cert_dir(tmp_path_factory):
    """Self-signed client certificate as .pfx (password protected) and .pem."""
    directory = tmp_path_factory.mktemp("certs")
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "docman-test-client")])
    now = datetime.now(timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .sign(key, hashes.SHA256())
    )

    pfx = pkcs12.serialize_key_and_certificates(
        b"docman-test-client", key, cert, None,
        serialization.BestAvailableEncryption(CERT_PASSWORD.encode()),
    )
    (directory / "client.pfx").write_bytes(pfx)

    pem = cert.public_bytes(serialization.Encoding.PEM) + key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )
    (directory / "client.pem").write_bytes(pem)
    return directory


@pytest.fixture
def encryption():
    return PasswordEncryption(ENCRYPTION_KEY)


@pytest.fixture
def settings():
    return Settings(TargetedVoyagerInstance="Voyager1", TargetedVoyagerEnvironment="Production")


@pytest.fixture
def overrides(cert_dir, encryption):
    """All three endpoint keys for Voyager1.Production."""
    keys = endpoint_keys("Voyager1", "Production")
    return {
        keys.url: BASE_URL,
        keys.certificate_path: str(cert_dir / "client.pfx"),
        keys.password: encryption.encrypt_password(CERT_PASSWORD),
    }


class FakeDocManServer:
    """In-memory stand-in for the DocMan API, served through httpx.MockTransport."""

    def __init__(self):
        self.files: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")[2:]  # drop api/v1
        method = request.method

        if parts == ["heartbeat"]:
            return httpx.Response(200, json="2026-10-19T08:00:00Z")
        if parts == ["heartbeat", "connectionstring"]:
            return httpx.Response(200, text="DocManPrimary")

        if parts == ["files"] and method == "GET":
            include_deleted = request.url.params.get("deleted") == "true"
            items = [f for f in self.files.values() if include_deleted or not f["deleted"]]
            return httpx.Response(200, json=items)
        if parts == ["files"] and method == "POST":
            body = json.loads(request.content)
            if body["id"] == str(NIL_UUID):
                body["id"] = str(uuid4())
            self.files[body["id"]] = body
            return httpx.Response(201, json=body["id"])

        if len(parts) >= 2 and parts[0] == "files":
            file_id = parts[1]
            if file_id not in self.files:
                return httpx.Response(404, json={"title": "Not Found"})
            if len(parts) == 3 and parts[2] == "physical" and method == "DELETE":
                del self.files[file_id]
                return httpx.Response(204)
            if len(parts) == 3 and parts[2] == "virtualpath":
                stored = self.files[file_id]
                return httpx.Response(200, text=f"/{stored['fhClaimNumber']}/{stored['name']}")
            if method == "GET":
                return httpx.Response(200, json=self.files[file_id])
            if method == "PUT":
                self.files[file_id] = json.loads(request.content)
                return httpx.Response(204)
            if method == "DELETE":
                self.files[file_id]["deleted"] = True
                return httpx.Response(204)

        return httpx.Response(404, json={"title": "Not Found"})


@pytest.fixture
def fake_server():
    return FakeDocManServer()


@pytest_asyncio.fixture
async def services(settings, overrides, encryption, fake_server):
    """Fully registered services talking to the fake server."""
    registered = register_services(
        settings,
        overrides=overrides,
        decryptor=encryption,
        transport=httpx.MockTransport(fake_server.handle),
    )
    async with registered:
        yield registered


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=BASE_URL + "/", transport=httpx.MockTransport(handler))


@pytest.fixture
def make_client():
    """Factory for an httpx client whose requests are answered by ``handler``."""
    return mock_client
