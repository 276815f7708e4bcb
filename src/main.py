from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import httpx

from src.application.use_cases.authenticate import LoginUseCase, LogoutUseCase, SignupUseCase
from src.application.use_cases.load_dashboard import LoadDashboardUseCase
from src.application.use_cases.manage_notes import NotesUseCase
from src.application.use_cases.manage_profile import ProfileUseCase
from src.domain.errors import AuthenticationRequired, FormValidationError, RequestError
from src.infrastructure.api.notes_api_client import NotesApiClient
from src.infrastructure.config import get_settings
from src.infrastructure.logger import configure_logging
from src.infrastructure.session.local_storage import LocalStorage
from src.infrastructure.session.session_context import SessionContext

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_LOGIN_REQUIRED = 2


def create_client(
    api_url: str | None = None,
    storage_dir: Path | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> NotesApiClient:
    settings = get_settings()
    directory = storage_dir if storage_dir is not None else settings.storage_dir
    session = SessionContext(LocalStorage(directory))
    return NotesApiClient(api_url or settings.api_url, session, transport=transport)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="notes-client", description="Command-line client for the notes backend.")
    ap.add_argument("--api-url", default=None, help="Backend base URL (default: env NOTES_API_URL)")
    ap.add_argument("--storage-dir", type=Path, default=None, help="Where the session token is kept (default: env NOTES_STORAGE_DIR)")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("signup", help="Create an account and log in")
    p.add_argument("name")
    p.add_argument("email")
    p.add_argument("password")

    p = sub.add_parser("login", help="Log in and store the session token")
    p.add_argument("email")
    p.add_argument("password")

    sub.add_parser("logout", help="Forget the stored session token")
    sub.add_parser("status", help="Tell whether a session token is stored")
    sub.add_parser("dashboard", help="Show the dashboard greeting")

    profile = sub.add_parser("profile", help="Show or edit the user profile")
    profile_sub = profile.add_subparsers(dest="action", required=True)
    profile_sub.add_parser("show")
    p = profile_sub.add_parser("update")
    p.add_argument("--name", required=True)
    p.add_argument("--email", required=True)
    p.add_argument("--bio", default="")
    p.add_argument("--password", default="", help="Leave out to keep the current password")

    notes = sub.add_parser("notes", help="List and edit notes")
    notes_sub = notes.add_subparsers(dest="action", required=True)
    notes_sub.add_parser("list")
    p = notes_sub.add_parser("create")
    p.add_argument("title")
    p.add_argument("content")
    p = notes_sub.add_parser("update")
    p.add_argument("id")
    p.add_argument("title")
    p.add_argument("content")
    p = notes_sub.add_parser("delete")
    p.add_argument("id")
    p.add_argument("--yes", action="store_true", help="Do not ask for confirmation")
    return ap


async def run(args: argparse.Namespace, client: NotesApiClient) -> int:
    if args.command == "signup":
        await SignupUseCase(client).execute(args.name, args.email, args.password)
        print("Account created successfully!")
    elif args.command == "login":
        await LoginUseCase(client).execute(args.email, args.password)
        print("Logged in successfully!")
    elif args.command == "logout":
        LogoutUseCase(client).execute()
        print("Logged out.")
    elif args.command == "status":
        print("Logged in" if client.session.is_authenticated() else "Not logged in")
    elif args.command == "dashboard":
        profile = await LoadDashboardUseCase(client).execute()
        print(f"Welcome back, {profile.name}!")
        print(profile.email)
    elif args.command == "profile":
        uc = ProfileUseCase(client)
        if args.action == "show":
            profile = await uc.load()
            print(f"Name:  {profile.name}")
            print(f"Email: {profile.email}")
            print(f"Bio:   {profile.bio}")
        else:
            await uc.update(args.name, args.email, args.bio, args.password)
            print("Profile updated successfully!")
    elif args.command == "notes":
        uc = NotesUseCase(client)
        if args.action == "list":
            notes = await uc.list_notes()
            if not notes:
                print("No notes yet.")
            for note in notes:
                created = note.created_at.strftime("%Y-%m-%d") if note.created_at else ""
                print(f"[{note.id}] {note.title} {created}".rstrip())
                print(f"    {note.content}")
        elif args.action == "create":
            await uc.save_note(args.title, args.content)
            print("Note created successfully!")
        elif args.action == "update":
            await uc.save_note(args.title, args.content, note_id=args.id)
            print("Note updated successfully!")
        else:
            if not args.yes:
                answer = input("Are you sure you want to delete this note? [y/N] ")
                if answer.strip().lower() not in ("y", "yes"):
                    return EXIT_OK
            await uc.delete_note(args.id)
            print("Note deleted successfully!")
    return EXIT_OK


def main(argv: list[str] | None = None, transport: httpx.AsyncBaseTransport | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    client = create_client(args.api_url, args.storage_dir, transport=transport)
    try:
        return asyncio.run(run(args, client))
    except AuthenticationRequired as exc:
        print(f"{exc.message}: run `notes-client login`", file=sys.stderr)
        return EXIT_LOGIN_REQUIRED
    except (RequestError, FormValidationError) as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_FAILED
    except httpx.HTTPError as exc:
        print(f"Could not reach {client.base_url}: {exc}", file=sys.stderr)
        return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
