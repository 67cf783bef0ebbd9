"""Realm Architect dev launcher. Starts the API server in watch mode."""

import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "13013")


def main():
    parser = argparse.ArgumentParser(description="Realm Architect dev launcher")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed every new realm's random source (reproducible games)")
    parser.add_argument("--port", default=PORT, help=f"API port (default: {PORT})")
    args = parser.parse_args()

    # Build env for the server process so the app picks up the seed
    env = os.environ.copy()
    if args.seed is not None:
        env["REALM_SEED"] = str(args.seed)

    print(f"Starting API on http://localhost:{args.port} ...")
    proc = subprocess.Popen(
        [sys.executable, "-m", "uvicorn", "backend.app:app", "--reload",
         "--host", HOST, "--port", str(args.port)],
        cwd=ROOT, env=env,
    )
    try:
        proc.wait()
    except KeyboardInterrupt:
        print("\nShutting down...")
        proc.terminate()
        proc.wait()


if __name__ == "__main__":
    main()
