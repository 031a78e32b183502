# Interactive Password Generator
# Purpose: ask for a length and character types, then print one password and its strength.
# Passwords come from a time-seeded linear-congruential generator and are NOT cryptographically secure.

import logging
import sys

from core import configure_logging
from cli.generator import generate_password_flow


logger = logging.getLogger(__name__)


# run the full flow and map I/O failures to a non-zero exit status
def main():
    configure_logging()

    try:
        print("🔐 Password Generator\n")
        generate_password_flow()
    except EOFError:
        logger.error("Input closed before generation finished")
        print("\nError: input ended unexpectedly.", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"I/O failure during generation: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130

    return 0


# script entry
if __name__ == "__main__":
    sys.exit(main())
