"""Hash, verify and inspect passwords from the command line."""
from __future__ import annotations

import argparse
import binascii
import getpass
import logging
import sys

from . import DEFAULT_CONFIG, create_hasher, inspect_hash
from .errors import ConfigError, HeaderError, UnsupportedDigestError


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="adaptive-hasher",
        description="PBKDF2 password hashes with the parameters stored inside the hash.",
    )
    ap.add_argument("--iterations", type=int, default=DEFAULT_CONFIG["ITERATIONS"])
    ap.add_argument("--salt-bits", type=int, default=DEFAULT_CONFIG["SALT_BITS"])
    ap.add_argument("--key-bits", type=int, default=DEFAULT_CONFIG["KEY_BITS"])
    ap.add_argument("--digest", default="sha256", help="sha256 or sha512 (default sha256)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")

    sub = ap.add_subparsers(dest="cmd", required=True)

    p_hash = sub.add_parser("hash", help="Hash a password and print it as hex")
    p_hash.add_argument("--password", default=None, help="Password (unsafe on shared shells)")

    p_verify = sub.add_parser("verify", help="Check a password against a hex hash")
    p_verify.add_argument("hash")
    p_verify.add_argument("--password", default=None, help="Password (unsafe on shared shells)")

    p_inspect = sub.add_parser("inspect", help="Show the parameters stored in a hex hash")
    p_inspect.add_argument("hash")
    return ap


def _read_password(args: argparse.Namespace) -> str:
    if args.password is not None:
        return args.password
    return getpass.getpass("Password: ")


def _unhex(value: str) -> bytes:
    try:
        return binascii.unhexlify(value.strip())
    except (binascii.Error, ValueError):
        return b""


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "inspect":
        try:
            info = inspect_hash(_unhex(args.hash))
        except (HeaderError, UnsupportedDigestError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
        print(f"digest:     {info.digest_name}")
        print(f"iterations: {info.iterations}")
        print(f"salt size:  {info.salt_size} bytes")
        print(f"key size:   {info.key_size} bytes")
        return 0

    try:
        hasher = create_hasher(
            {
                "ITERATIONS": args.iterations,
                "SALT_BITS": args.salt_bits,
                "KEY_BITS": args.key_bits,
                "DIGEST": args.digest,
            }
        )
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        password = _read_password(args)
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 2

    if args.cmd == "hash":
        print(binascii.hexlify(hasher.hash(password)).decode("ascii"))
        return 0

    if hasher.verify(password, _unhex(args.hash)):
        print("OK")
        return 0
    print("FAILED")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
