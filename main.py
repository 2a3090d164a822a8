"""Entry: recommend or list skills from the command line."""
import sys

from skillscout.config import LOG_LEVEL, validate_skills_file
from skillscout.logging_utils import configure_logging


def main() -> None:
    configure_logging(LOG_LEVEL)
    try:
        validate_skills_file()
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    from skillscout.cli import run_cli
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
