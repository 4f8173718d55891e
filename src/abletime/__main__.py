"""`python -m abletime` support."""

from abletime.cli.main import run

if __name__ == "__main__":
    run()
