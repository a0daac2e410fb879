#!/usr/bin/env python3
# =============================================================================
# scripts/generate_certs.py - Self-Signed TLS Certificates
# =============================================================================
# Creates certs/key.pem and certs/cert.pem for local HTTPS.
# The server switches to HTTPS automatically when both files exist.
#
# Usage:
#   poetry run python scripts/generate_certs.py
#
# Prerequisites:
#   - openssl on PATH
# =============================================================================

import subprocess
import sys
from pathlib import Path

CERTS_DIR = Path(__file__).resolve().parent.parent / "certs"
KEY_PATH = CERTS_DIR / "key.pem"
CERT_PATH = CERTS_DIR / "cert.pem"


def main() -> int:
    if KEY_PATH.exists() and CERT_PATH.exists():
        print("Certificates already exist at certs/key.pem and certs/cert.pem")
        return 0

    CERTS_DIR.mkdir(parents=True, exist_ok=True)

    cmd = [
        "openssl", "req", "-x509",
        "-newkey", "rsa:2048",
        "-keyout", str(KEY_PATH),
        "-out", str(CERT_PATH),
        "-days", "365",
        "-nodes",
        "-subj", "/CN=localhost",
    ]
    try:
        subprocess.run(cmd, check=True)
    except (OSError, subprocess.CalledProcessError):
        print("openssl failed. Install OpenSSL or generate certs manually, e.g.:")
        print('  mkdir -p certs && openssl req -x509 -newkey rsa:2048 -keyout certs/key.pem '
              '-out certs/cert.pem -days 365 -nodes -subj "/CN=localhost"')
        return 1

    print("Created certs/key.pem and certs/cert.pem. Start the server to use HTTPS.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
