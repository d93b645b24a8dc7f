"""
Create any missing tables.
Usage: python -m nexttalent.scripts.ensure_tables
"""
from nexttalent.database import ensure_tables_exist


def main():
    ensure_tables_exist()
    print("DB table check complete: created only missing tables.")


if __name__ == "__main__":
    main()
