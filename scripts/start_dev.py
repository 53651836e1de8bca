#!/usr/bin/env python3
"""
Run the storefront locally with auto-reload.

Checks that the package is installed and a config/.env exists (seeding
it from config/.env.example), warns when no session keys are set up,
then hands over to uvicorn.
"""

import importlib.util
import os
import shutil
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

REQUIRED_MODULES = ("fastapi", "uvicorn", "pydantic_settings", "jwt", "cryptography", "jinja2")


def missing_modules() -> list[str]:
    return [name for name in REQUIRED_MODULES if importlib.util.find_spec(name) is None]


def ensure_env_file() -> bool:
    """Create config/.env from the example on first run"""
    env_file = CONFIG_DIR / ".env"
    if env_file.exists():
        return True

    example = CONFIG_DIR / ".env.example"
    if not example.exists():
        print(f"No {env_file} and no example to copy it from.")
        return False

    shutil.copy(example, env_file)
    print(f"Created {env_file} from .env.example - review the admin password before sharing this server.")
    return True


def session_keys_present() -> bool:
    keys_dir = CONFIG_DIR / "keys"
    return all((keys_dir / name).exists() for name in ("session_private.pem", "session_public.pem"))


def main():
    missing = missing_modules()
    if missing:
        print(f"Missing packages for: {', '.join(missing)}")
        print("Install the project first: pip install -e .")
        sys.exit(1)

    if not ensure_env_file():
        sys.exit(1)

    if not session_keys_present():
        print("No session keys in config/keys - logins will be lost on every reload.")
        print("Create them with: python scripts/generate_keys.py")

    port = os.environ.get("PORT", "8001")
    print(f"Walkie Talkie Rentals on http://localhost:{port} (API docs at /docs)")

    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "storefront.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", port,
        ],
        cwd=PROJECT_ROOT,
    )

    try:
        process.wait()
    except KeyboardInterrupt:
        process.terminate()
        process.wait()
        print("\nStorefront stopped.")


if __name__ == "__main__":
    main()
