#!/usr/bin/env python3
"""Create a FitTrack account from the command line (e.g. the first admin)."""
import asyncio
from getpass import getpass

from sqlalchemy import select, or_

from fittrack.core.database import AsyncSessionLocal, engine
from fittrack.core.security import hash_password
from fittrack.models.user import User, UserType


async def create_user() -> None:
    username = input("Username: ").strip()
    email = input("Email: ").strip()
    name = input("First name: ").strip()
    last_name = input("Last name: ").strip()
    role = input("Type [USER/ADMIN]: ").strip().upper() or "USER"

    pw1 = getpass("Password: ")
    pw2 = getpass("Repeat password: ")
    if pw1 != pw2:
        raise SystemExit("Passwords do not match")
    if len(pw1) < 8:
        raise SystemExit("Password must be at least 8 characters")

    async with AsyncSessionLocal() as db:
        result = await db.execute(
            select(User).where(or_(User.username == username, User.email == email))
        )
        if result.scalar_one_or_none():
            raise SystemExit(f"A user with username {username!r} or email {email!r} already exists")

        user = User(
            username=username,
            email=email,
            name=name,
            last_name=last_name,
            password=hash_password(pw1),
            type=UserType(role),
        )
        db.add(user)
        await db.commit()
        print(f"Created {user.type.value} user {user.username} (id={user.id})")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(create_user())
