"""
python -m hippo auth ...        — log in, print the token
python -m hippo register ...    — register a revision
"""

import sys


def main() -> None:
    if len(sys.argv) < 2 or sys.argv[1] not in ("auth", "register"):
        print("Usage: hippo <auth|register> [options]", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]
    sys.argv = [sys.argv[0], *sys.argv[2:]]

    if command == "auth":
        from .auth import main as auth_main

        auth_main()
    else:
        from .client import main as client_main

        client_main()


if __name__ == "__main__":
    main()
