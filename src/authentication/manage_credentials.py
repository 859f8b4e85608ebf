# src/authentication/manage_credentials.py

import argparse
import sys

from authentication.application.auth_service import AuthService
from authentication.infrastructure.auth_repository import CredentialStore, EmployeeRepository
from authentication.infrastructure.database_connection import close_connection, connect_database
from sales_inquiry.errors import SalesInquiryError


def show_status(repo: CredentialStore, code: str) -> int:
    identity = repo.find_by_code(code)
    if identity is None:
        print(f"❌ Employee {code} not found (or inactive).")
        return 1

    state = "set" if identity.password_set else "not set (first login pending)"
    print(f"👤 {identity.code} - {identity.display_name}")
    print(f"   access scope: {identity.access_scope or '(none)'}")
    print(f"   password: {state}")
    return 0


def setup_password(repo: CredentialStore, code: str, password: str) -> int:
    try:
        session = AuthService(repo).setup_password(code, password)
    except SalesInquiryError as e:
        print(f"❌ {e.user_message}")
        return 1
    print(f"✅ Password created for {session.claim.code} ({session.claim.display_name}).")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Employee credential management for Sales Inquiry")
    subparsers = parser.add_subparsers(dest="command", required=True)

    status_parser = subparsers.add_parser("status", help="Show whether an employee has a password")
    status_parser.add_argument("code", help="Employee code")

    setup_parser = subparsers.add_parser("setup", help="Create the first password of an employee")
    setup_parser.add_argument("code", help="Employee code")
    setup_parser.add_argument("password", help="New password")

    return parser


def main(argv=None, repo: CredentialStore | None = None) -> int:
    args = build_parser().parse_args(argv)

    conn = None
    if repo is None:
        conn = connect_database()
        repo = EmployeeRepository(conn)
    try:
        if args.command == "status":
            return show_status(repo, args.code)
        return setup_password(repo, args.code, args.password)
    finally:
        close_connection(conn)


if __name__ == "__main__":
    sys.exit(main())
