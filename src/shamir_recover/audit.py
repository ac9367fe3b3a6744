# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Offline audit trail for reconstructions, with Ed25519 signatures and hash chaining.

Each reconstruction attempt is written as its own JSON file. The payload
carries the chain hash of the previous entry, so :meth:`AuditTrail.verify_chain`
detects deleted, reordered or edited entries. Secrets never reach the trail;
a successful entry keeps only a digest of the decimal secret.
"""
from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict, List

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from .reconstruct import Reconstruction

GENESIS = "GENESIS"
RECONSTRUCT_SUCCEEDED = "reconstruct.succeeded"
RECONSTRUCT_FAILED = "reconstruct.failed"


class AuditError(RuntimeError):
    """Raised when the audit trail cannot be checked."""


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


def secret_digest(secret: int) -> str:
    return hashlib.sha3_256(str(secret).encode("ascii")).hexdigest()


def reconstruction_details(source: str, result: Reconstruction) -> Dict[str, Any]:
    return {
        "source": source,
        "threshold": result.config.k,
        "declared_shares": result.config.n,
        "selected_x": [str(point.x) for point in result.selected],
        "discarded_x": [str(point.x) for point in result.discarded],
        "secret_sha3_256": secret_digest(result.secret),
    }


class AuditTrail:
    """Append-only log of reconstruction attempts stored under *directory*.

    The signing key is created by the first recorded entry. Verification only
    ever reads the existing key.
    """

    def __init__(self, directory: os.PathLike[str] | str) -> None:
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        self.key_path = self.directory / "signing_key.pem"
        self.chain_state_path = self.directory / "chain.state"

    def _signing_key(self) -> Ed25519PrivateKey:
        if self.key_path.exists():
            return serialization.load_pem_private_key(self.key_path.read_bytes(), password=None)
        private_key = Ed25519PrivateKey.generate()
        self.key_path.write_bytes(
            private_key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        )
        return private_key

    def _verification_key(self) -> Ed25519PublicKey:
        if not self.key_path.exists():
            raise AuditError(f"No signing key in {self.directory}; nothing has been recorded there")
        private_key = serialization.load_pem_private_key(self.key_path.read_bytes(), password=None)
        return private_key.public_key()

    def head(self) -> str:
        """Chain hash of the latest entry, or ``GENESIS`` for an empty trail."""
        try:
            return self.chain_state_path.read_text().strip()
        except FileNotFoundError:
            return GENESIS

    def entries(self) -> List[Path]:
        return sorted(self.directory.glob("audit_*.json"))

    def _append(self, event: str, details: Dict[str, Any]) -> Path:
        timestamp = int(time.time())
        payload = {
            "event": event,
            "details": details,
            "timestamp": timestamp,
            "prev_hash": self.head(),
        }
        message = _canonical(payload)
        signature = self._signing_key().sign(message)
        chain_hash = hashlib.sha3_512(message + signature).hexdigest()
        entry = {
            "payload": payload,
            "signature": signature.hex(),
            "chain_hash": chain_hash,
        }
        file_path = self.directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
        file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
        self.chain_state_path.write_text(chain_hash)
        return file_path

    def record_reconstruction(self, source: str, result: Reconstruction) -> Path:
        return self._append(RECONSTRUCT_SUCCEEDED, reconstruction_details(source, result))

    def record_failure(self, source: str, error: BaseException) -> Path:
        return self._append(RECONSTRUCT_FAILED, {"source": source, "error": type(error).__name__})

    def verify(self, path: os.PathLike[str] | str) -> bool:
        """Check the signature and chain hash of a single entry."""
        public_key = self._verification_key()
        data = json.loads(Path(path).read_text())
        payload = _canonical(data["payload"])
        signature = bytes.fromhex(data.get("signature") or "")
        try:
            public_key.verify(signature, payload)
        except InvalidSignature:
            return False
        return hashlib.sha3_512(payload + signature).hexdigest() == data.get("chain_hash")

    def verify_chain(self) -> bool:
        """Walk back from the head to ``GENESIS`` and require every entry on the way."""
        by_hash: Dict[str, Path] = {}
        for path in self.entries():
            if not self.verify(path):
                return False
            by_hash[json.loads(path.read_text())["chain_hash"]] = path

        current = self.head()
        visited = 0
        while current != GENESIS:
            path = by_hash.get(current)
            if path is None:
                return False
            current = json.loads(path.read_text())["payload"]["prev_hash"]
            visited += 1
            if visited > len(by_hash):
                return False
        return visited == len(by_hash)


__all__ = [
    "AuditError",
    "AuditTrail",
    "GENESIS",
    "RECONSTRUCT_FAILED",
    "RECONSTRUCT_SUCCEEDED",
    "reconstruction_details",
    "secret_digest",
]
