"""Run the exptree CLI.

Usage:
    python -m exptree.cli check myapp.rules:admin_access -p role=admin
"""

from exptree.cli.main import main

if __name__ == "__main__":
    main()
