"""Command-line client for the auth API.

Usage:
    authservice-client register --name Ana --email ana@x.com
    authservice-client login --email ana@x.com
    authservice-client dashboard
    authservice-client logout
"""

import argparse
import getpass
import sys
import time

from client.api import ApiError, AuthApiClient
from client.session import SessionStore

MIN_PASSWORD_LENGTH = 6
REDIRECT_DELAY_SECONDS = 2.0


def validate_registration(name: str, email: str, password: str, confirm_password: str) -> str | None:
    """Return an error message for obviously bad input, or None."""
    if not name.strip():
        return "Name is required"
    if "@" not in email:
        return "Please enter a valid email"
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if password != confirm_password:
        return "Passwords do not match"
    return None


def validate_login(email: str, password: str) -> str | None:
    if "@" not in email:
        return "Please enter a valid email"
    if not password:
        return "Password is required"
    return None


def redirect_to_login(delay: float = 0.0, sleep=time.sleep) -> None:
    if delay:
        sleep(delay)
    print("Redirecting to login: run `authservice-client login`")


def cmd_register(client: AuthApiClient, args) -> int:
    password = args.password or getpass.getpass("Password: ")
    confirm_password = args.confirm_password or getpass.getpass("Confirm password: ")
    error = validate_registration(args.name, args.email, password, confirm_password)
    if error:
        print(error, file=sys.stderr)
        return 1

    try:
        data = client.register(args.name, args.email, password, confirm_password)
    except ApiError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(data.get("message", "Registration successful!"))
    return 0


def cmd_login(client: AuthApiClient, args) -> int:
    password = args.password or getpass.getpass("Password: ")
    error = validate_login(args.email, password)
    if error:
        print(error, file=sys.stderr)
        return 1

    try:
        data = client.login(args.email, password)
    except ApiError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(data.get("message", "Login successful!"))
    return 0


def cmd_dashboard(client: AuthApiClient, args, sleep=time.sleep) -> int:
    """Show the current user; any failure clears the session."""
    if not client.session.token:
        redirect_to_login()
        return 1

    try:
        user = client.get_current_user()
    except ApiError:
        print("Failed to fetch user data. Please login again.", file=sys.stderr)
        client.logout()
        redirect_to_login(REDIRECT_DELAY_SECONDS, sleep=sleep)
        return 1

    print(f"Welcome, {user['name']}!")
    print(f"  ID:    {user['id']}")
    print(f"  Name:  {user['name']}")
    print(f"  Email: {user['email']}")
    return 0


def cmd_logout(client: AuthApiClient, args) -> int:
    client.logout()
    redirect_to_login()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="authservice-client", description="Auth API client")
    parser.add_argument("--api-url", default=None, help="API base URL (default: $AUTH_API_URL)")
    parser.add_argument("--session-file", default=None, help="Session file (default: $AUTH_SESSION_FILE)")
    sub = parser.add_subparsers(dest="command", required=True)

    register = sub.add_parser("register", help="Create an account")
    register.add_argument("--name", required=True)
    register.add_argument("--email", required=True)
    register.add_argument("--password", help="Prompted when omitted")
    register.add_argument("--confirm-password", help="Prompted when omitted")
    register.set_defaults(handler=cmd_register)

    login = sub.add_parser("login", help="Log in")
    login.add_argument("--email", required=True)
    login.add_argument("--password", help="Prompted when omitted")
    login.set_defaults(handler=cmd_login)

    dashboard = sub.add_parser("dashboard", help="Show the logged-in user")
    dashboard.set_defaults(handler=cmd_dashboard)

    logout = sub.add_parser("logout", help="Forget the stored token")
    logout.set_defaults(handler=cmd_logout)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    with AuthApiClient(SessionStore(args.session_file), base_url=args.api_url) as client:
        return args.handler(client, args)


if __name__ == "__main__":
    sys.exit(main())
