"""Shared plumbing for CLI commands: logging, settings and I/O."""

import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Callable, Optional

from stringtools.config import Settings, load_settings
from stringtools.exceptions import InvalidPatternError, SettingsValidationError


logger = logging.getLogger(__name__)


def setup_logging(args: Namespace):
    """Configure logging from --log-level, --debug and --quiet."""
    level_name = getattr(args, 'log_level', 'warn')
    log_level = getattr(logging, 'WARNING' if level_name == 'warn' else level_name.upper())
    if getattr(args, 'debug', False):
        log_level = logging.DEBUG
    elif getattr(args, 'quiet', False):
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def resolve_settings(args: Namespace) -> Optional[Settings]:
    """Load the settings file named by --config, if any."""
    config = getattr(args, 'config', None)
    if not config:
        return None
    return load_settings(Path(config))


def read_input(args: Namespace) -> str:
    """Read the text named by --in, or stdin."""
    src = getattr(args, 'src', None)
    if not src:
        return sys.stdin.read()
    with Path(src).open('r', encoding='utf-8') as f:
        return f.read()


def write_output(args: Namespace, text: str):
    """Write ``text`` to the file named by --out, or stdout."""
    dst = getattr(args, 'dst', None)
    if not dst:
        sys.stdout.write(text)
        return
    dst_path = Path(dst)
    dst_path.parent.mkdir(parents=True, exist_ok=True)
    with dst_path.open('w', encoding='utf-8') as f:
        f.write(text)


def run_command(args: Namespace, body: Callable[[Optional[Settings]], int]) -> int:
    """
    Run a command body with logging, settings and error-to-exit-code mapping.

    Exit codes: 0 success, 1 I/O failure, 2 invalid settings, pattern or input.
    """
    setup_logging(args)
    try:
        settings = resolve_settings(args)
        return body(settings)
    except SettingsValidationError as e:
        for error in e.errors:
            logger.error(f"Validation error: {error.message}")
        return e.exit_code
    except InvalidPatternError as e:
        logger.error(str(e))
        return 2
    except UnicodeDecodeError as e:
        logger.error(f"Input is not valid UTF-8: {e}")
        return 1
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
