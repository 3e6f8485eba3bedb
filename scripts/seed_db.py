"""
Seed script for the Tourist Safety Hub storage backend.

Usage:
  - Dry run (default): python -m scripts.seed_db
  - Apply to configured backend: python -m scripts.seed_db --apply
  - Force the memory backend (smoke test): python -m scripts.seed_db --apply --backend memory

Behavior:
  - Builds the storage bundle from STORAGE_BACKEND (or --backend).
  - Writes the demo user, two demo alerts and one demo issuance,
    unless the demo user already exists.

NOTE: For Firestore, ensure `FIREBASE_CREDENTIALS_PATH` and
`STORAGE_BACKEND=firestore` are set in `.env` before running.
"""

import argparse

from app.core.settings import settings
from app.storage.registry import create_storage
from app.storage.seed import DEMO_EMAIL, DEMO_PASSWORD, seed_demo_data


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--apply", action="store_true", help="Write seed to the backend instead of dry-run")
    parser.add_argument("--backend", choices=["memory", "firestore"], help="Override STORAGE_BACKEND")
    args = parser.parse_args()

    backend = args.backend or settings.STORAGE_BACKEND
    print(f"Target backend: {backend}")
    print("Preparing: users/demo-user-123, alerts/alert-demo-1, alerts/alert-demo-2, blockchain_issuances/blockchain-demo-1, 3 x tracking_points")

    if not args.apply:
        print("Dry run complete. Re-run with --apply to write to the backend.")
        return

    storage = create_storage(backend)
    if seed_demo_data(storage, bcrypt_rounds=settings.BCRYPT_ROUNDS):
        print(f"Seeding completed. Demo login: {DEMO_EMAIL} / {DEMO_PASSWORD}")
    else:
        print("Demo data already present, nothing written.")


if __name__ == "__main__":
    main()
