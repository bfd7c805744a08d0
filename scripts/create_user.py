#!/usr/bin/env python
"""
CLI script to create users for the ToDoList backend.

Usage:
    python create_user.py --name Ann --email ann@example.com
    python create_user.py --name Ann --email ann@example.com --password mypassword

If no password is provided, a random secure password will be generated.
"""
import argparse
import asyncio
import secrets
import string
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from todolist.auth.service import AuthService
from todolist.config import get_settings
from todolist.errors import TodoAppError
from todolist.models.user import UserCreate
from todolist.services.firestore import FirestoreService, build_firestore_client


def generate_password(length: int = 16) -> str:
    """Generate a random secure password."""
    alphabet = string.ascii_letters + string.digits + "!@#$%^&*"
    password = ''.join(secrets.choice(alphabet) for _ in range(length))
    return password


async def create_user(request: UserCreate, auth: AuthService) -> None:
    """Register a user through the auth service."""
    try:
        await auth.register(request.name, request.email, request.password)
    except TodoAppError as e:
        print(f"Error: {e.msg} ({request.email})")
        sys.exit(1)

    print(f"\n{'='*50}")
    print("User created successfully!")
    print(f"{'='*50}")
    print(f"Name:     {request.name}")
    print(f"Email:    {request.email}")
    print(f"Password: {request.password}")
    print(f"{'='*50}")
    print("\nPlease save the password securely and send it to the user.")
    print("The password cannot be retrieved later.\n")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Create a user for the ToDoList backend"
    )
    parser.add_argument(
        "--name",
        required=True,
        help="User's display name"
    )
    parser.add_argument(
        "--email",
        required=True,
        help="User's email address"
    )
    parser.add_argument(
        "--password",
        required=False,
        help="User's password (optional - will generate if not provided)"
    )

    args = parser.parse_args(argv)

    # Generate password if not provided
    password = args.password
    if not password:
        password = generate_password()
        print(f"Generated password: {password}")

    try:
        request = UserCreate(name=args.name, email=args.email, password=password)
    except ValidationError as e:
        print(f"Error: {e.errors()[0]['msg']}")
        sys.exit(1)

    settings = get_settings()
    auth = AuthService(settings, FirestoreService(build_firestore_client(settings)))
    asyncio.run(create_user(request, auth))


if __name__ == "__main__":
    main()
