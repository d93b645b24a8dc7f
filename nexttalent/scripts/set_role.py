"""
Assign a role to an existing profile. The only way to create an admin.
Usage: python -m nexttalent.scripts.set_role <profile_id> <admin|employer|user>
"""
import sys

from nexttalent.database import SessionLocal, ensure_tables_exist
from nexttalent.models.enums import Role
from nexttalent.repos.profile_repo import get_by_id, update


def main():
    if len(sys.argv) < 3:
        print("Usage: python -m nexttalent.scripts.set_role <profile_id> <admin|employer|user>")
        sys.exit(1)
    profile_id = sys.argv[1].strip()
    try:
        role = Role(sys.argv[2].strip().lower())
    except ValueError:
        print(f"Unknown role: {sys.argv[2]}")
        sys.exit(1)
    ensure_tables_exist()
    db = SessionLocal()
    try:
        if not get_by_id(db, profile_id):
            print(f"Profile not found: {profile_id}")
            sys.exit(1)
        update(db, profile_id, role=role.value)
        print(f"Profile {profile_id} now has role {role.value}.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
