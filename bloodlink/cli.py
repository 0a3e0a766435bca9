"""Operator commands installed as project scripts.

  bloodlink-runserver [--host HOST] [--port PORT] [--no-reload]
  bloodlink-migrate [ALEMBIC ARGS...]   # defaults to `upgrade head`
  bloodlink-init-env                    # .env from .env.example, creates UPLOAD_DIR
  bloodlink-run-tests [PYTEST ARGS...]
"""
from __future__ import annotations

import argparse
import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from bloodlink.core.config import settings
from bloodlink.core.logger import setup_logging

logger = logging.getLogger("bloodlink.cli")

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _argv(argv: Optional[List[str]]) -> List[str]:
    return sys.argv[1:] if argv is None else argv


def runserver(argv: Optional[List[str]] = None) -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    parser = argparse.ArgumentParser(prog="bloodlink-runserver")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", dest="reload", action="store_true", default=True)
    parser.add_argument("--no-reload", dest="reload", action="store_false")
    args = parser.parse_args(_argv(argv))

    setup_logging()
    logger.info("Starting BloodLink API on %s:%s (reload=%s)", args.host, args.port, args.reload)
    uvicorn.run("bloodlink.main:app", host=args.host, port=args.port, reload=args.reload)


def alembic_command(args: List[str]) -> List[str]:
    """Alembic invocation pinned to this project's config, whatever the cwd."""
    config = PROJECT_ROOT / "alembic.ini"
    return ["alembic", "-c", str(config)] + (args or ["upgrade", "head"])


def run_migrations(argv: Optional[List[str]] = None) -> None:
    setup_logging()
    cmd = alembic_command(_argv(argv))
    logger.info("Running %s", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=PROJECT_ROOT)


def init_env(argv: Optional[List[str]] = None) -> None:
    """Create `.env` from `.env.example` and the local upload directory.

    An existing `.env` is left alone.
    """
    setup_logging()
    src = PROJECT_ROOT / ".env.example"
    dst = PROJECT_ROOT / ".env"
    if dst.exists():
        logger.info(".env already present at %s", dst)
    elif not src.exists():
        logger.warning("No .env.example at %s; skipping .env", src)
    else:
        shutil.copy(src, dst)
        logger.info("Created %s from .env.example", dst)

    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Profile images will be stored in %s", upload_dir)


def run_tests(argv: Optional[List[str]] = None) -> None:
    result = subprocess.run(["pytest"] + _argv(argv), cwd=PROJECT_ROOT)
    sys.exit(result.returncode)
