#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[1]
sys.path.append(str(project_root))

from sqlmodel import Session

from ewallet.core.database import engine
from ewallet.core.security import hash_provider
from ewallet.services.users import UserService


def main() -> int:
    parser = argparse.ArgumentParser(description="Resetear password de un usuario por email")
    parser.add_argument("--email", required=True, help="Email del usuario")
    parser.add_argument("--password", required=True, help="Nueva contraseña")
    args = parser.parse_args()

    email = args.email.strip().lower()

    with Session(engine) as session:
        user = UserService.get_user_by_email(session, email)
        if not user:
            print(f"❌ Usuario no encontrado: {email}")
            return 1

        UserService.update_user(
            session,
            user_id=user.id,
            password_hash=hash_provider.generate_hash(args.password),
        )

    print(f"✅ Password actualizado para {email}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
