"""
WalkMate client - command line access to the WalkMate backend.

Runs the same domain calls the app makes and prints the results, which is
handy for checking a token or poking at the backend by hand.

Usage:
    python main.py login-url
    python main.py login --code AUTH_CODE
    python main.py --token TOKEN dashboard
    python main.py history --start 2024-01-01 --type OUTDOOR
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

import httpx

from cli.display import (
    console,
    mask_token,
    print_data,
    print_error,
    print_notifications,
    print_pain_history,
)
from modules.auth import AuthService, UserRole
from modules.dashboard import DashboardService
from modules.exercise import ExerciseHistoryParams, ExerciseLocation, ExerciseService
from modules.guardian import GuardianService
from modules.health import HealthService, PainHistoryParams
from shared.client import ApiClient
from shared.config import Settings, get_settings
from shared.exceptions import WalkMateError
from shared.session import Session
from shared.storage import LocalStorage
from store import create_store


logger = logging.getLogger(__name__)


async def run_command(args: argparse.Namespace, settings: Settings) -> None:
    """Execute one backend command against a fresh client."""
    session = Session(args.token or settings.auth_token)
    async with ApiClient(base_url=args.base_url, session=session) as api:
        auth = AuthService(api)

        if args.command == "login-url":
            url = await auth.get_oauth_url(args.provider)
            console.print(f"[bold]Login URL ({args.provider}):[/bold] {url}")

        elif args.command == "providers":
            providers = await auth.get_oauth_providers()
            console.print(f"[bold]OAuth providers:[/bold] {', '.join(providers)}")

        elif args.command == "login":
            token = await auth.process_oauth_callback(args.provider, args.code)
            expires_at = session.expires_at
            console.print(f"[green]Logged in.[/green] Token: {token}")
            if expires_at is not None:
                console.print(f"[dim]Expires at {expires_at.isoformat()}[/dim]")

        elif args.command == "dashboard":
            print_data("Patient dashboard", await DashboardService(api).get_patient_dashboard())

        elif args.command == "exercises":
            print_data("Exercises", await ExerciseService(api).get_exercise_list())

        elif args.command == "history":
            params = ExerciseHistoryParams(
                exercise_type=args.type,
                start_date=args.start,
                end_date=args.end,
            )
            print_data("Exercise history", await ExerciseService(api).get_exercise_history(params))

        elif args.command == "pain-history":
            params = PainHistoryParams(start_date=args.start, end_date=args.end)
            print_pain_history(await HealthService(api).get_pain_history(params))

        elif args.command == "guardian":
            print_data("Guardian dashboard", await GuardianService(api).get_guardian_dashboard())

        elif args.command == "notifications":
            print_notifications(await GuardianService(api).get_guardian_notifications())

        elif args.command == "logout":
            if session.is_authenticated:
                console.print(f"[dim]Dropping token {mask_token(session.get_token())}[/dim]")
            store = create_store(LocalStorage(settings.storage_path))
            auth.perform_logout(store.auth)
            console.print("[green]Logged out.[/green]")


def run_local_command(args: argparse.Namespace, settings: Settings) -> None:
    """Commands that only touch device storage and need no client."""
    store = create_store(LocalStorage(settings.storage_path))

    if args.command == "role":
        if args.role:
            store.auth.save_user_role(UserRole(args.role))
            console.print(f"[green]Role saved:[/green] {args.role}")
            return
        store.auth.load_stored_state()
        role = store.auth.user_role.value if store.auth.user_role else "not set"
        console.print(f"[bold]Role:[/bold] {role}")
        console.print(f"[bold]Onboarding completed:[/bold] {store.auth.onboarding_completed}")


LOCAL_COMMANDS = {"role"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Command line client for the WalkMate backend")
    parser.add_argument(
        "--token",
        type=str,
        help="Bearer token (default: WALKMATE_AUTH_TOKEN)",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        help="Backend base URL (default: WALKMATE_API_BASE_URL)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log request tracing")

    commands = parser.add_subparsers(dest="command", required=True)

    login_url = commands.add_parser("login-url", help="Print the OAuth login URL")
    login_url.add_argument("--provider", default="kakao", help="OAuth provider (default: kakao)")

    commands.add_parser("providers", help="List the enabled OAuth providers")

    login = commands.add_parser("login", help="Exchange an OAuth code for a token")
    login.add_argument("--code", required=True, help="Authorization code from the provider")
    login.add_argument("--provider", default="kakao", help="OAuth provider (default: kakao)")

    commands.add_parser("dashboard", help="Show the patient dashboard")
    commands.add_parser("exercises", help="List exercises")

    history = commands.add_parser("history", help="Show exercise history")
    history.add_argument(
        "--type",
        choices=[t.value for t in ExerciseLocation],
        help="Exercise type filter",
    )
    history.add_argument("--start", help="Start date, YYYY-MM-DD")
    history.add_argument("--end", help="End date, YYYY-MM-DD")

    pain_history = commands.add_parser("pain-history", help="Show pain history")
    pain_history.add_argument("--start", help="Start date, YYYY-MM-DD")
    pain_history.add_argument("--end", help="End date, YYYY-MM-DD")

    commands.add_parser("guardian", help="Show the guardian dashboard")
    commands.add_parser("notifications", help="List guardian notifications")

    role = commands.add_parser("role", help="Show or save the device user role")
    role.add_argument("role", nargs="?", choices=[r.value for r in UserRole])

    commands.add_parser("logout", help="Forget the device role and onboarding state")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command in LOCAL_COMMANDS:
            run_local_command(args, settings)
        else:
            asyncio.run(run_command(args, settings))
    except WalkMateError as e:
        print_error(e.message)
        if e.details.get("server_message"):
            console.print(f"[dim]Server said: {e.details['server_message']}[/dim]")
        return 1
    except httpx.HTTPError as e:
        logger.debug(f"Network failure: {e!r}")
        print_error(f"Network error: {e}")
        return 1
    except ValueError as e:
        # pydantic rejects bad dates and the like before any request is made
        print_error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
