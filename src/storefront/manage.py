"""Storefront management CLI.

Usage:
    storefront-manage setup-db        # Create all tables
    storefront-manage drop-db         # Drop all tables
    storefront-manage seed [--reset]  # Load demo users, products and orders
    storefront-manage create-admin --username root --email root@example.com --password s3cret!
"""

import argparse
import sys


def _initialized_domain():
    from storefront.domain import storefront

    print("Initializing storefront domain...")
    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    domain = _initialized_domain()
    print("Creating database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _initialized_domain()
    print("Dropping database schema...")
    drop_db(domain)
    print("Done.")


def seed(reset=False):
    from storefront.seed import DEMO_USERS, seed_demo_data

    domain = _initialized_domain()
    with domain.domain_context():
        seed_demo_data(reset=reset)

    print("Test accounts:")
    for user in DEMO_USERS:
        print(f"  {user['role']:<5} {user['email']} / {user['password']}")


def create_admin(username, email, password):
    from protean.exceptions import ValidationError

    from storefront.identity.registration import RegisterUser
    from storefront.identity.user import Role

    domain = _initialized_domain()
    with domain.domain_context():
        try:
            user_id = domain.process(
                RegisterUser(username=username, email=email, password=password, role=Role.ADMIN.value),
                asynchronous=False,
            )
        except ValidationError as exc:
            print(f"Could not create admin: {exc.messages}", file=sys.stderr)
            sys.exit(1)

    print(f"Admin {email} created with id {user_id}.")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Load demo data")
    seed_parser.add_argument("--reset", action="store_true", help="Delete existing data first")

    admin_parser = subparsers.add_parser("create-admin", help="Create an administrator account")
    admin_parser.add_argument("--username", required=True)
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed(reset=args.reset)
    elif args.command == "create-admin":
        create_admin(args.username, args.email, args.password)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
