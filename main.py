import sys

from quotebox.core.runner import main as run_main


def main() -> None:
    sys.exit(run_main())


if __name__ == "__main__":
    main()
