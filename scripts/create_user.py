#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[1]
sys.path.append(str(project_root))

from sqlmodel import Session

from ewallet.core.database import create_db_and_tables, engine
from ewallet.core.errors import AppError
from ewallet.services.users import UserService


def main() -> int:
    parser = argparse.ArgumentParser(description="Crear un usuario de eWallet")
    parser.add_argument("--email", required=True, help="Email del usuario")
    parser.add_argument("--name", required=True, help="Nombre del usuario")
    parser.add_argument("--password", required=True, help="Contraseña")
    parser.add_argument("--create-tables", action="store_true", help="Crear tablas si no existen")
    args = parser.parse_args()

    if args.create_tables:
        create_db_and_tables()

    with Session(engine) as session:
        try:
            user = UserService.create_user(
                session,
                email=args.email,
                name=args.name,
                password=args.password,
                password_confirmation=args.password,
            )
        except AppError as e:
            print(f"❌ {e.message}")
            return 1

    print(f"✅ Usuario creado: {user.email} ({user.id})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
