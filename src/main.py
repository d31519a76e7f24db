"""Run the CLI from inside `src/` during development: `python -m main stats ROUTER`."""

from cli.main import run

if __name__ == "__main__":
    run()
