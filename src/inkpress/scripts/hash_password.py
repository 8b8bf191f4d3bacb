"""Print a bcrypt hash for the ADMIN_PASSWORD_HASH setting."""
from __future__ import annotations

import argparse
import getpass
import sys

from inkpress.core.security import hash_admin_password, verify_admin_password


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Hash the admin publishing password")
    parser.add_argument(
        "--password",
        default=None,
        help="Password to hash (prompted for when omitted)",
    )
    args = parser.parse_args(argv)

    password = args.password or getpass.getpass("Admin password: ")
    if not password:
        print("[hash_password] ERROR: empty password", file=sys.stderr)
        sys.exit(1)

    hashed = hash_admin_password(password)
    if not verify_admin_password(password, hashed):  # pragma: no cover - bcrypt invariant
        print("[hash_password] ERROR: hash does not verify", file=sys.stderr)
        sys.exit(1)
    print(hashed)


if __name__ == "__main__":
    main()
