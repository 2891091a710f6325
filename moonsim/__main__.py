"""Command-line interface."""
from moonsim.constants import REFERENCE_POSITIONS, max_iterations_from_env
from moonsim.logging_config import setup_logging
from moonsim.physics import run_positions


def main() -> None:
    setup_logging()
    report = run_positions(REFERENCE_POSITIONS, max_iterations=max_iterations_from_env())
    print(report.describe())


if __name__ == "__main__":
    main()
