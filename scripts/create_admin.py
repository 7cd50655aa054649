"""Create the first administrator account."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.errors import DomainError
from app.application.use_cases import create_user
from app.domain.entities.user import ROLE_ADMIN
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an administrator account.")
    parser.add_argument("--fullname", default="Administrateur", help="Nom complet")
    parser.add_argument("--telephone", required=True, help="Numéro de téléphone (identifiant)")
    parser.add_argument(
        "--password",
        default=None,
        help="Mot de passe. Demandé interactivement s'il est omis.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    password = args.password or getpass("Mot de passe de l'administrateur : ")
    if not password:
        raise SystemExit("Aucun mot de passe fourni.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            fullname=args.fullname,
            telephone=args.telephone,
            password=password,
            role=ROLE_ADMIN,
        )
    except DomainError as exc:
        session.rollback()
        raise SystemExit(f"Impossible de créer l'administrateur : {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Erreur lors de l'enregistrement : {exc}") from exc
    else:
        print(
            "Administrateur créé :\n"
            f"  ID: {user.id}\n"
            f"  Nom: {user.fullname}\n"
            f"  Téléphone: {user.telephone}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
