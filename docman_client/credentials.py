"""Client credentials — password decryption and client certificate loading.

The certificate password is stored Fernet-encrypted in the layered config
source. The encryption key is read from DOCMAN_ENCRYPTION_KEY and stretched
with PBKDF2 so operators can use a passphrase rather than a raw Fernet key.
"""

from __future__ import annotations

import base64
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

from cryptography import x509
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives.serialization import (
    BestAvailableEncryption,
    Encoding,
    NoEncryption,
    PrivateFormat,
    load_pem_private_key,
    pkcs12,
)

from docman_client.exceptions import CredentialError

logger = logging.getLogger(__name__)

ENCRYPTION_KEY_ENV = "DOCMAN_ENCRYPTION_KEY"
KDF_SALT = b"Corp.Api.DocMan.Client"
KDF_ITERATIONS = 100_000

PKCS12_SUFFIXES = {".pfx", ".p12"}


class PasswordDecryptor(Protocol):
    def decrypt_password(self, encrypted_password: str) -> str: ...


class PasswordEncryption:
    """Fernet encryption of certificate passwords."""

    def __init__(self, encryption_key: str | None = None):
        key_string = encryption_key or os.environ.get(ENCRYPTION_KEY_ENV)
        if not key_string:
            raise CredentialError(f"{ENCRYPTION_KEY_ENV} is not set")
        self._cipher = self._derive_cipher(key_string)

    @staticmethod
    def _derive_cipher(key_string: str) -> Fernet:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=KDF_SALT,
            iterations=KDF_ITERATIONS,
        )
        derived = base64.urlsafe_b64encode(kdf.derive(key_string.encode("utf-8")))
        return Fernet(derived)

    def encrypt_password(self, password: str) -> str:
        return self._cipher.encrypt(password.encode("utf-8")).decode("utf-8")

    def decrypt_password(self, encrypted_password: str) -> str:
        try:
            return self._cipher.decrypt(encrypted_password.encode("utf-8")).decode("utf-8")
        except InvalidToken as e:
            raise CredentialError("Certificate password could not be decrypted") from e


@dataclass
class ClientCertificate:
    """Private key and certificate chain presented for mutual TLS."""
    private_key: object
    certificate: x509.Certificate
    additional_certificates: list[x509.Certificate] = field(default_factory=list)

    @property
    def subject(self) -> str:
        return self.certificate.subject.rfc4514_string()

    @property
    def not_valid_after(self) -> datetime:
        return self.certificate.not_valid_after_utc

    @property
    def is_expired(self) -> bool:
        return self.not_valid_after <= datetime.now(timezone.utc)

    def to_pem(self, password: bytes | None = None) -> bytes:
        """Serialize the chain and key as PEM, key encrypted when password is set."""
        encryption = BestAvailableEncryption(password) if password else NoEncryption()
        chain = [self.certificate, *self.additional_certificates]
        certs = b"".join(cert.public_bytes(Encoding.PEM) for cert in chain)
        key = self.private_key.private_bytes(Encoding.PEM, PrivateFormat.PKCS8, encryption)
        return certs + key


def _load_pkcs12(data: bytes, password: bytes | None) -> ClientCertificate:
    key, cert, extra = pkcs12.load_key_and_certificates(data, password)
    if key is None or cert is None:
        raise CredentialError("PKCS#12 bundle does not contain both a private key and a certificate")
    return ClientCertificate(private_key=key, certificate=cert, additional_certificates=list(extra))


def _load_pem(data: bytes, password: bytes | None) -> ClientCertificate:
    certs = x509.load_pem_x509_certificates(data)
    try:
        key = load_pem_private_key(data, password)
    except TypeError:
        # Key is not encrypted but a password was supplied
        key = load_pem_private_key(data, None)
    return ClientCertificate(private_key=key, certificate=certs[0], additional_certificates=certs[1:])


def load_client_certificate(path: str | Path, password: str) -> ClientCertificate:
    """Load a PKCS#12 (.pfx/.p12) or PEM client certificate from disk.

    Raises CredentialError when the file is missing or unreadable, the
    password is wrong, or the file holds no usable key/certificate pair.
    """
    cert_path = Path(path)
    try:
        data = cert_path.read_bytes()
    except OSError as e:
        raise CredentialError(f"Client certificate {cert_path} could not be read: {e}") from e

    secret = password.encode("utf-8") if password else None
    try:
        if cert_path.suffix.lower() in PKCS12_SUFFIXES:
            certificate = _load_pkcs12(data, secret)
        else:
            certificate = _load_pem(data, secret)
    except CredentialError:
        raise
    except (ValueError, TypeError) as e:
        raise CredentialError(f"Client certificate {cert_path} could not be loaded: {e}") from e

    if certificate.is_expired:
        logger.warning(
            "Client certificate %s expired on %s", certificate.subject, certificate.not_valid_after,
        )
    logger.info("Loaded client certificate %s from %s", certificate.subject, cert_path)
    return certificate
